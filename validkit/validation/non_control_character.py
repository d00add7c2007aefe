"""Checks that a text holds no control characters."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

__all__ = ["validate_non_control_character"]


def validate_non_control_character(value: Iterable[str]) -> bool:
    """Tell whether no character of ``value`` is a control character.

    ``value`` is a string or any iterable of characters; control characters
    are those of the Unicode general category Cc.
    """
    return all(unicodedata.category(char) != "Cc" for char in value)