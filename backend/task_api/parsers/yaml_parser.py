"""YAML parser for uploaded test suites."""
from __future__ import annotations

from typing import Any, List

import yaml

from ..models import TestCase
from .base import BaseParser


class YAMLParser(BaseParser):
    """Parse YAML suites.

    Two layouts are accepted: a top-level list, or a mapping whose
    ``testCases`` key holds the list. Items are either mappings with a
    ``testString`` key or bare strings.
    """

    def parse(self, source: str) -> List[TestCase]:
        try:
            document = yaml.safe_load(source)
        except yaml.YAMLError as exc:
            raise ValueError(f"Unable to read YAML suite: {exc}") from exc

        if isinstance(document, dict):
            if "testCases" not in document:
                raise ValueError("YAML suite must be a list of test cases or contain a 'testCases' list.")
            document = document["testCases"]
        if document is None:
            return []
        if not isinstance(document, list):
            raise ValueError("YAML suite must be a list of test cases or contain a 'testCases' list.")

        cases: List[TestCase] = []
        for position, item in enumerate(document, start=1):
            record: Any = {"testString": item} if isinstance(item, str) else item
            if not isinstance(record, dict):
                raise ValueError(f"Entry #{position} must be a string or a mapping.")
            cases.append(self._build_case(record, position))
        return cases
