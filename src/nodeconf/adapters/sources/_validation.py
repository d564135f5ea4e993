"""Per-field validators shared by the JSON file and CLI/environment sources.

Every raw value is validated on its own with a pydantic ``TypeAdapter``.
Failures are captured as :class:`~nodeconf.domain.field_state.Invalid`
instead of raised, so the merge step decides whether they matter.
"""

from __future__ import annotations

from ipaddress import ip_address
from pathlib import Path
from typing import Annotated, Any, Final, TypeVar

from pydantic import AfterValidator, Field, StrictStr, TypeAdapter, ValidationError

from nodeconf.domain.field_state import ABSENT, FieldState, Invalid, Valid

T = TypeVar("T")


def _to_path(raw: str) -> Path:
    return Path(raw)


IP_ADDRESS: Final = TypeAdapter(Annotated[StrictStr, AfterValidator(ip_address)])
PORT_NUMBER: Final = TypeAdapter(Annotated[int, Field(ge=0, le=65535)])
TEXT: Final = TypeAdapter(StrictStr)
FILE_PATH: Final = TypeAdapter(Annotated[StrictStr, AfterValidator(_to_path)])
LABELS: Final = TypeAdapter(dict[StrictStr, StrictStr])


def describe_validation_error(exc: ValidationError, value: Any) -> str:
    """Collapse a pydantic error into one line naming the rejected input.

    Example:
        >>> try:
        ...     PORT_NUMBER.validate_python(70000)
        ... except ValidationError as exc:
        ...     describe_validation_error(exc, 70000)
        'Input should be less than or equal to 65535 (got 70000)'
    """
    messages = "; ".join(dict.fromkeys(str(err["msg"]) for err in exc.errors()))
    return f"{messages} (got {value!r})"


def to_state(adapter: TypeAdapter[T], value: Any, *, strict: bool) -> FieldState[T]:
    """Validate ``value`` into a field state.

    ``None`` means the source did not supply the field.

    Args:
        adapter: Validator for the field's type.
        value: Raw value from the source.
        strict: Reject type coercion (JSON numbers must be numbers); the
            CLI source passes False so ``"1234"`` becomes ``1234``.

    Example:
        >>> to_state(PORT_NUMBER, "1234", strict=False)
        Valid(value=1234)
        >>> to_state(PORT_NUMBER, "1234", strict=True)
        Invalid(error="Input should be a valid integer (got '1234')")
        >>> to_state(TEXT, None, strict=True)
        ABSENT
    """
    if value is None:
        return ABSENT
    try:
        return Valid(adapter.validate_python(value, strict=strict))
    except ValidationError as exc:
        return Invalid(describe_validation_error(exc, value))


__all__ = [
    "FILE_PATH",
    "IP_ADDRESS",
    "LABELS",
    "PORT_NUMBER",
    "TEXT",
    "describe_validation_error",
    "to_state",
]
