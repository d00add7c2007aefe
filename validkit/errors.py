"""Error types produced by validation, and their textual rendering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional, Union

__all__ = [
    "ValidationError",
    "FieldErrors",
    "StructErrors",
    "ListErrors",
    "ErrorKind",
    "ValidationErrors",
]

# Key under which collection validators report their per-item errors before
# they are attached to the real field name by ``merge_self``.
COLLECTION_KEY = "_tmp_validator"


class ValidationError(Exception):
    """A single failed check: a code, an optional message and parameters."""

    def __init__(
        self,
        code: str,
        message: Optional[str] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(code)
        self.code = code
        self.message = message
        self.params: dict[str, Any] = dict(params) if params else {}

    def add_param(self, name: str, value: Any) -> None:
        """Record a parameter describing the failure, such as the checked value."""
        self.params[name] = value

    def with_message(self, message: str) -> ValidationError:
        """Set the message shown instead of the generated description."""
        self.message = message
        return self

    def __str__(self) -> str:
        if self.message is not None:
            return self.message
        return f"Validation error: {self.code} [{self.params!r}]"

    def __repr__(self) -> str:
        return (
            f"ValidationError(code={self.code!r}, message={self.message!r}, "
            f"params={self.params!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.code, self.message, self.params) == (
            other.code,
            other.message,
            other.params,
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass
class FieldErrors:
    """Errors found directly on a field."""

    errors: list[ValidationError] = field(default_factory=list)


@dataclass
class StructErrors:
    """Errors found inside a nested validated value."""

    errors: ValidationErrors


@dataclass
class ListErrors:
    """Errors found in items of a collection, keyed by item position."""

    errors: dict[int, ValidationErrors] = field(default_factory=dict)


ErrorKind = Union[FieldErrors, StructErrors, ListErrors]


class ValidationErrors(Exception):
    """All errors found while validating one value, keyed by field name."""

    def __init__(self, errors: Optional[dict[str, ErrorKind]] = None) -> None:
        super().__init__("Validation failed")
        self.errors: dict[str, ErrorKind] = dict(errors) if errors else {}

    @staticmethod
    def has_error(result: Optional[ValidationErrors], field: str) -> bool:
        """Tell whether a validation outcome holds errors for ``field``."""
        if result is None:
            return False
        return field in result.errors

    def merge_self(
        self, field: str, child: Optional[ValidationErrors]
    ) -> ValidationErrors:
        """Attach the outcome of validating ``field`` to these errors."""
        if child is None:
            return self
        collection = child.errors.pop(COLLECTION_KEY, None)
        if collection is not None:
            self._add_nested(field, collection)
        else:
            self._add_nested(field, StructErrors(child))
        return self

    @staticmethod
    def merge(
        parent: Optional[ValidationErrors],
        field: str,
        child: Optional[ValidationErrors],
    ) -> Optional[ValidationErrors]:
        """Combine a parent outcome with the nested outcome of one field."""
        if child is None:
            return parent
        parent_errors = parent if parent is not None else ValidationErrors()
        parent_errors._add_nested(field, StructErrors(child))
        return parent_errors

    @staticmethod
    def merge_all(
        parent: Optional[ValidationErrors],
        field: str,
        children: Iterable[Optional[ValidationErrors]],
    ) -> Optional[ValidationErrors]:
        """Combine a parent outcome with the outcomes of a list field's items."""
        collected: dict[int, ValidationErrors] = {}
        for index, child in enumerate(children):
            if child is None:
                continue
            entry = child.errors.pop(field, None)
            if isinstance(entry, StructErrors):
                collected[index] = entry.errors
        if not collected:
            return parent
        parent_errors = parent if parent is not None else ValidationErrors()
        parent_errors._add_nested(field, ListErrors(collected))
        return parent_errors

    def field_errors(self) -> dict[str, list[ValidationError]]:
        """Return only the errors found directly on fields."""
        return {
            name: kind.errors
            for name, kind in self.errors.items()
            if isinstance(kind, FieldErrors)
        }

    def add(self, field: str, error: ValidationError) -> None:
        """Add an error for ``field``."""
        kind = self.errors.setdefault(field, FieldErrors())
        if not isinstance(kind, FieldErrors):
            raise ValueError(
                "Attempt to add field validation to a non-field error entry"
            )
        kind.errors.append(error)

    def is_empty(self) -> bool:
        return not self.errors

    def _add_nested(self, field: str, kind: ErrorKind) -> None:
        if field in self.errors:
            raise ValueError("Attempt to replace non-empty ValidationErrors entry")
        self.errors[field] = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return self.errors == other.errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ValidationErrors({self.errors!r})"

    def __str__(self) -> str:
        return "\n".join(
            "".join(_render(kind, path)) for path, kind in self.errors.items()
        )


def _render(kind: ErrorKind, path: str) -> Iterator[str]:
    if isinstance(kind, FieldErrors):
        yield f"{path}: " + ", ".join(str(err) for err in kind.errors)
    elif isinstance(kind, StructErrors):
        yield from _render_struct(kind.errors, path)
    else:
        for index, errors in sorted(kind.errors.items()):
            yield from _render_struct(errors, f"{path}[{index}]")


def _render_struct(errors: ValidationErrors, path: str) -> Iterator[str]:
    for name, kind in errors.errors.items():
        yield from _render(kind, f"{path}.{name}")