"""Checks that two values are equal."""

from __future__ import annotations

from typing import Any

__all__ = ["validate_must_match"]


def validate_must_match(a: Any, b: Any) -> bool:
    """Tell whether ``a`` and ``b`` are equal; two ``None`` values match."""
    return a == b