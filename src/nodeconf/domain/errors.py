"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Configuration could not be loaded or resolved.

    Base class for every failure raised while building the node
    configuration. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from nodeconf.domain.errors import ConfigurationError
        >>> err = ConfigurationError("no configuration")
        >>> str(err)
        'no configuration'
    """


class SourceError(ConfigurationError):
    """A configuration source could not be read or parsed as a whole.

    Raised for unreadable files and malformed JSON. Fatal: startup aborts
    even when other sources supply every field.

    Example:
        >>> str(SourceError("unexpected character: line 3 column 5"))
        'unexpected character: line 3 column 5'
    """


class FallbackError(ConfigurationError):
    """A fallback could not compute a default value.

    Raised by fallback functions (hostname lookup, home directory lookup,
    node IP discovery). The resolver re-raises it as a :class:`FieldError`
    for the field the fallback was standing in for.
    """


class FieldError(ConfigurationError):
    """The winning value for one configuration field is unusable.

    Attributes:
        field: Logical field name, e.g. ``"server port"``.
        cause: Original parse or lookup failure text.

    Example:
        >>> err = FieldError("server port", "Input should be a valid integer")
        >>> str(err)
        'invalid server port in configuration: Input should be a valid integer'
        >>> err.field
        'server port'
    """

    def __init__(self, field: str, cause: str) -> None:
        self.field = field
        self.cause = cause
        super().__init__(f"invalid {field} in configuration: {cause}")


__all__ = [
    "ConfigurationError",
    "FallbackError",
    "FieldError",
    "SourceError",
]
