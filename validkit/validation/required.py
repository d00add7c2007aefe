"""Checks that a value is present."""

from __future__ import annotations

from typing import Any

__all__ = ["validate_required"]


def validate_required(value: Any) -> bool:
    """Tell whether ``value`` is present, that is, not ``None``."""
    return value is not None