"""Task list service with a wildcard parenthesis validator."""

__version__ = "1.0.0"
