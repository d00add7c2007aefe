"""Checks that a string or a mapping's keys contain, or lack, a needle."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["validate_contains", "validate_does_not_contain"]


def validate_contains(value: Any, needle: str) -> bool:
    """Tell whether ``needle`` is a substring of ``value`` or a key of it.

    Strings are searched for the substring, mappings for the key; ``None``
    passes.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return needle in value
    if isinstance(value, Mapping):
        return needle in value
    raise TypeError(f"cannot check containment in {type(value).__name__}")


def validate_does_not_contain(value: Any, needle: str) -> bool:
    """The negation of :func:`validate_contains`."""
    return not validate_contains(value, needle)