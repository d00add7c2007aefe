"""Checks that a string matches a regular expression."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional, Union

__all__ = ["as_regex", "validate_regex"]

PatternLike = Union[str, "re.Pattern[str]"]


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def as_regex(pattern: PatternLike) -> re.Pattern[str]:
    """Return ``pattern`` as a compiled expression, compiling strings once."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return _compile(pattern)
    raise TypeError(f"cannot use {type(pattern).__name__} as a regular expression")


def validate_regex(value: Optional[str], pattern: PatternLike) -> bool:
    """Tell whether ``pattern`` matches anywhere in ``value``; ``None`` passes."""
    if value is None:
        return True
    if not isinstance(value, str):
        raise TypeError(f"cannot match {type(value).__name__} against a pattern")
    return as_regex(pattern).search(value) is not None