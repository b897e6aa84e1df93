"""Completion language server for PHP."""

__version__ = "0.1.0"
