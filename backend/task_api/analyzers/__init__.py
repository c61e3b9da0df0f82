"""Batch evaluation of validation test cases."""
