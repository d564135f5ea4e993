"""Tri-state representation of a single configuration field.

A source either says nothing about a field (:class:`Absent`), supplies a
value that failed to parse (:class:`Invalid`), or supplies a usable value
(:class:`Valid`). Keeping parse failures as data lets the merge step decide
which source wins before any error is raised.

Contents:
    * :data:`ABSENT` - Shared marker for fields no source mentioned.
    * :class:`Invalid` - Present value that failed validation.
    * :class:`Valid` - Present, validated value.
    * :data:`FieldState` - Union of the three variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Absent:
    """No source supplied this field.

    Example:
        >>> Absent() == ABSENT
        True
    """

    def __repr__(self) -> str:
        return "ABSENT"


@dataclass(frozen=True, slots=True)
class Invalid:
    """A source supplied this field but its value could not be parsed.

    Attributes:
        error: Human-readable description of the parse failure.

    Example:
        >>> Invalid("not a valid port").error
        'not a valid port'
    """

    error: str


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    """A source supplied this field and its value parsed successfully.

    Example:
        >>> Valid(3000).value
        3000
    """

    value: T


ABSENT = Absent()

FieldState = Absent | Invalid | Valid[T]
"""Union of the three states a configuration field can be in."""


def is_present(state: FieldState[object]) -> bool:
    """Return True when a source supplied the field, valid or not.

    Example:
        >>> is_present(ABSENT)
        False
        >>> is_present(Invalid("bad"))
        True
    """
    return not isinstance(state, Absent)


def valid_or_absent(value: T | None) -> FieldState[T]:
    """Wrap an optional, already-valid value.

    Example:
        >>> valid_or_absent(None)
        ABSENT
        >>> valid_or_absent("node-1")
        Valid(value='node-1')
    """
    if value is None:
        return ABSENT
    return Valid(value)


__all__ = [
    "ABSENT",
    "Absent",
    "FieldState",
    "Invalid",
    "Valid",
    "is_present",
    "valid_or_absent",
]
