"""Tests for batch evaluation of test cases."""
import itertools

import pytest

from task_api.analyzers.batch import BatchCaseError, evaluate_batch, evaluate_case, summarize
from task_api.models import TestCase


def _cases(*values):
    return [TestCase(test_string=value) for value in values]


class TestEvaluateBatch:
    """Test suite for evaluate_batch and summarize."""

    def test_empty_batch_reports_zero_pass_rate(self):
        """An empty batch is accepted and reports 0.00%."""
        batch = evaluate_batch([])

        assert batch.results == []
        assert batch.summary.total == 0
        assert batch.summary.passed == 0
        assert batch.summary.failed == 0
        assert batch.summary.pass_rate == 0.0
        assert batch.summary.model_dump(mode="json", by_alias=True)["passRate"] == "0.00%"

    def test_summary_counts_and_rounding(self):
        """Two of three passing gives 66.67%."""
        batch = evaluate_batch(_cases("()", ")(", "(*)"))

        assert batch.summary.total == 3
        assert batch.summary.passed == 2
        assert batch.summary.failed == 1
        assert batch.summary.pass_rate == 66.67
        assert batch.summary.model_dump(mode="json", by_alias=True)["passRate"] == "66.67%"

    def test_all_passing(self):
        """A fully passing batch reports 100.00%."""
        batch = evaluate_batch(_cases("", "**", "((**"))
        assert batch.summary.model_dump(mode="json", by_alias=True)["passRate"] == "100.00%"

    def test_preserves_order_for_all_permutations(self):
        """Results line up with the input order whatever that order is."""
        values = ["()", ")(", "(*", ")"]
        for permutation in itertools.permutations(values):
            batch = evaluate_batch(_cases(*permutation))
            assert [result.test_string for result in batch.results] == list(permutation)

    def test_default_description_and_labels(self):
        """Missing descriptions fall back to 'Test case'."""
        results = evaluate_batch(
            [
                TestCase(test_string="()", description="pair"),
                TestCase(test_string=")("),
            ]
        ).results

        assert results[0].description == "pair"
        assert results[0].result == "passed"
        assert results[1].description == "Test case"
        assert results[1].result == "failed"

    def test_rejects_whole_batch_on_unsupported_character(self):
        """One bad case rejects the batch and names its position."""
        with pytest.raises(BatchCaseError) as excinfo:
            evaluate_batch(_cases("()", "(x)"))

        assert excinfo.value.index == 1
        assert "#2" in str(excinfo.value)

    def test_summarize_accepts_iterators(self):
        """summarize works over any iterable of results."""
        results = (evaluate_case(case) for case in _cases("()", ")"))
        summary = summarize(results)

        assert (summary.total, summary.passed, summary.failed) == (2, 1, 1)
        assert summary.pass_rate == 50.0

    def test_rejects_batch_when_bad_character_follows_unmatched_closer(self):
        """The whole batch is rejected even if the bad case would fail anyway."""
        with pytest.raises(BatchCaseError) as excinfo:
            evaluate_batch(_cases(")[]"))

        assert excinfo.value.index == 0
