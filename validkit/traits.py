"""The validation protocol and helpers for collections of validated values."""

from __future__ import annotations

import dataclasses
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Optional, TypeVar

from validkit.errors import COLLECTION_KEY, ListErrors, ValidationErrors

__all__ = [
    "Validatable",
    "validate_collection",
    "validate_mapping",
    "validate_optional",
]

T = TypeVar("T")

_SEQUENCE_TYPES = (list, tuple, set, frozenset, deque)


class Validatable:
    """A value that can check itself.

    ``validate`` returns ``None`` when the value is valid and raises
    ``ValidationErrors`` otherwise. The default implementation validates
    every public attribute that is itself validatable, or is a collection or
    mapping of validatable values, and nests their errors under the
    attribute's name. Subclasses override it to add their own checks.
    """

    def validate(self) -> None:
        errors = ValidationErrors()
        for name, value in self._public_fields():
            errors.merge_self(name, _nested_outcome(value))
        if not errors.is_empty():
            raise errors

    def _public_fields(self) -> Iterator[tuple[str, Any]]:
        if dataclasses.is_dataclass(self):
            names: Iterable[str] = (f.name for f in dataclasses.fields(self))
        else:
            names = list(vars(self))
        for name in names:
            if not name.startswith("_"):
                yield name, getattr(self, name)


def validate_collection(items: Iterable[Validatable]) -> None:
    """Validate every item, raising with the failing items keyed by position."""
    _raise_list_errors(items)


def validate_mapping(mapping: Mapping[Any, Validatable]) -> None:
    """Validate every value of a mapping, keyed by position in iteration order."""
    _raise_list_errors(mapping.values())


def validate_optional(value: Optional[Validatable]) -> None:
    """Validate ``value`` unless it is ``None``."""
    if value is not None:
        value.validate()


def _raise_list_errors(items: Iterable[Validatable]) -> None:
    failed: dict[int, ValidationErrors] = {}
    for index, item in enumerate(items):
        outcome = _outcome(lambda v: v.validate(), item)
        if outcome is not None:
            failed[index] = outcome
    if failed:
        raise ValidationErrors({COLLECTION_KEY: ListErrors(failed)})


def _outcome(check: Callable[[T], None], value: T) -> Optional[ValidationErrors]:
    try:
        check(value)
    except ValidationErrors as errors:
        return errors
    return None


def _all_validatable(values: Iterable[Any]) -> bool:
    values = list(values)
    return bool(values) and all(isinstance(v, Validatable) for v in values)


def _nested_outcome(value: Any) -> Optional[ValidationErrors]:
    if isinstance(value, Validatable):
        return _outcome(lambda v: v.validate(), value)
    if isinstance(value, Mapping) and _all_validatable(value.values()):
        return _outcome(validate_mapping, value)
    if isinstance(value, _SEQUENCE_TYPES) and _all_validatable(value):
        return _outcome(validate_collection, value)
    return None