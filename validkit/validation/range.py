"""Checks that a value lies within an inclusive or exclusive range."""

from __future__ import annotations

from typing import Any, Optional

__all__ = ["validate_range"]


def validate_range(
    value: Any,
    min: Optional[Any] = None,
    max: Optional[Any] = None,
    exclusive_min: Optional[Any] = None,
    exclusive_max: Optional[Any] = None,
) -> bool:
    """Tell whether ``value`` lies inside the given bounds.

    Bounds left as ``None`` are not checked, and a ``None`` value passes.
    Any values supporting ``<`` and ``>`` can be compared.
    """
    if value is None:
        return True
    if max is not None and value > max:
        return False
    if min is not None and value < min:
        return False
    if exclusive_max is not None and not value < exclusive_max:
        return False
    if exclusive_min is not None and not value > exclusive_min:
        return False
    return True