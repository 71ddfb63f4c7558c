"""Expense alternatives and savings growth calculator."""

__version__ = "0.1.0"
