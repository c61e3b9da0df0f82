"""Parsers that turn uploaded test-suite files into test cases."""

from pathlib import PurePath

from .base import BaseParser
from .csv_parser import CSVParser
from .yaml_parser import YAMLParser

_PARSERS = {
    ".csv": CSVParser,
    ".yaml": YAMLParser,
    ".yml": YAMLParser,
}


def get_parser(filename: str) -> BaseParser:
    """Return a parser instance matching the suffix of ``filename``."""
    suffix = PurePath(filename or "").suffix.lower()
    parser_cls = _PARSERS.get(suffix)
    if parser_cls is None:
        raise ValueError(f"Unsupported suite format '{suffix or filename}'. Use .csv, .yaml or .yml.")
    return parser_cls()


__all__ = ["BaseParser", "CSVParser", "YAMLParser", "get_parser"]
