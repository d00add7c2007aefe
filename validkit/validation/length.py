"""Checks that the length of a value lies within bounds."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Optional

__all__ = ["validate_length"]


def _length(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, Sized):
        # For strings this counts code points, not bytes.
        return len(value)
    raise TypeError(f"cannot take the length of {type(value).__name__}")


def validate_length(
    value: Any,
    min: Optional[int] = None,
    max: Optional[int] = None,
    equal: Optional[int] = None,
) -> bool:
    """Tell whether the length of ``value`` is within the given bounds.

    When ``equal`` is given, ``min`` and ``max`` are ignored. A ``None``
    value passes.
    """
    length = _length(value)
    if length is None:
        return True
    if equal is not None:
        return length == equal
    if min is not None and length < min:
        return False
    if max is not None and length > max:
        return False
    return True