"""Searching, sorting, array, stack and queue algorithms, with a query command."""

__version__ = "0.1.0"
__all__ = ["arrays", "problems", "searching", "sorting", "stack_problems", "stacks"]