"""CSV parser for uploaded test suites."""

import csv
from io import StringIO
from typing import List

from ..models import TestCase
from .base import BaseParser


class CSVParser(BaseParser):
    """Parse CSV suites with a ``testString`` column and an optional ``description``."""

    def parse(self, source: str) -> List[TestCase]:
        reader = csv.DictReader(StringIO(source))
        if not reader.fieldnames or "testString" not in reader.fieldnames:
            raise ValueError("CSV suite must have a 'testString' header column.")

        cases: List[TestCase] = []
        for position, row in enumerate(reader, start=1):
            record = {"testString": row.get("testString") or ""}
            if row.get("description"):
                record["description"] = row["description"]
            cases.append(self._build_case(record, position))
        return cases
