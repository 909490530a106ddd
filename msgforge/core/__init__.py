"""
Core formatting primitives: numeric rounding, locales and errors.
"""

from .errors import (
    MessageFormatError,
    InvalidArgumentError,
    NullInputError,
    InvalidRangeError,
    FormatNotFoundError,
)
from .locale import Locale, INVARIANT, get_locale, available_locales
from .numeric import NumericFormatter, RoundingMode

__all__ = [
    "MessageFormatError",
    "InvalidArgumentError",
    "NullInputError",
    "InvalidRangeError",
    "FormatNotFoundError",
    "Locale",
    "INVARIANT",
    "get_locale",
    "available_locales",
    "NumericFormatter",
    "RoundingMode",
]
