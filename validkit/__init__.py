"""Validation checks for common values and structured, nestable validation errors."""

__version__ = "0.20.0"