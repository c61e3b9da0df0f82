"""Base classes and interfaces for test-suite parsers."""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping

from pydantic import ValidationError

from ..models import TestCase


class BaseParser(ABC):
    """Abstract base class for test-suite parsers."""

    @abstractmethod
    def parse(self, source: str) -> List[TestCase]:
        """Parse the provided source and return the test cases it describes."""
        raise NotImplementedError

    @staticmethod
    def _build_case(record: Mapping[str, Any], position: int) -> TestCase:
        try:
            return TestCase.model_validate(dict(record))
        except ValidationError as exc:
            raise ValueError(f"Entry #{position} is not a valid test case: {exc.errors()[0]['msg']}") from exc
