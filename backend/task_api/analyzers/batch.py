"""Run the parenthesis validator over batches of test cases."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from ..models import (
    DEFAULT_DESCRIPTION,
    BatchResult,
    BatchSummary,
    TestCase,
    ValidationResult,
)
from ..validators import UnsupportedCharacterError, is_valid_string

logger = logging.getLogger(__name__)


class BatchCaseError(ValueError):
    """A case inside a batch could not be evaluated."""

    def __init__(self, index: int, error: UnsupportedCharacterError) -> None:
        self.index = index
        self.error = error
        super().__init__(f"Test case #{index + 1}: {error}")


def evaluate_case(case: TestCase) -> ValidationResult:
    """Validate a single case and label it ``passed`` or ``failed``."""
    is_valid = is_valid_string(case.test_string)
    return ValidationResult(
        test_string=case.test_string,
        description=case.description or DEFAULT_DESCRIPTION,
        is_valid=is_valid,
        result="passed" if is_valid else "failed",
    )


def summarize(results: Iterable[ValidationResult]) -> BatchSummary:
    """Aggregate pass/fail counts.

    An empty batch reports a pass rate of ``0.0``.
    """
    total = 0
    passed = 0
    for result in results:
        total += 1
        if result.is_valid:
            passed += 1

    pass_rate = round(passed / total * 100, 2) if total else 0.0
    return BatchSummary(total=total, passed=passed, failed=total - passed, pass_rate=pass_rate)


def evaluate_batch(cases: Sequence[TestCase]) -> BatchResult:
    """Validate every case in order and attach a summary.

    The batch is rejected as a whole with ``BatchCaseError`` if any case
    contains a character the validator does not accept.
    """
    results: List[ValidationResult] = []
    for index, case in enumerate(cases):
        try:
            results.append(evaluate_case(case))
        except UnsupportedCharacterError as exc:
            raise BatchCaseError(index, exc) from exc

    summary = summarize(results)
    logger.debug(
        "Evaluated batch: total=%d passed=%d failed=%d",
        summary.total,
        summary.passed,
        summary.failed,
    )
    return BatchResult(results=results, summary=summary)
