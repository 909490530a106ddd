"""
Error taxonomy for message formatting.

All errors are caller-input problems: they are raised at the call that
detects them and are never retried. Every class derives from ValueError so
callers that only care about "bad input" can catch the builtin.
"""

from typing import Optional


class MessageFormatError(ValueError):
    """Base class for all msgforge errors."""

    def __init__(self, message: str, param: Optional[str] = None):
        super().__init__(message)
        self.param = param


class InvalidArgumentError(MessageFormatError):
    """An argument is present but unusable (empty, blank, unsupported)."""


class NullInputError(InvalidArgumentError):
    """A required input was None."""

    def __init__(self, param: str, message: Optional[str] = None):
        super().__init__(message or f"{param} cannot be None", param=param)


class InvalidRangeError(InvalidArgumentError):
    """A numeric configuration value is outside its allowed range."""


class FormatNotFoundError(InvalidArgumentError):
    """No message schema is registered for a client id."""

    def __init__(self, client_id: str):
        super().__init__(
            f"No message format registered for client '{client_id}'",
            param="client_id"
        )
        self.client_id = client_id


def require(value, param: str):
    """Return value unchanged, raising NullInputError if it is None."""
    if value is None:
        raise NullInputError(param)
    return value


def require_text(value: Optional[str], param: str, label: Optional[str] = None) -> str:
    """Return value unchanged if it is a non-blank string."""
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{label or param} cannot be empty", param=param)
    return value
