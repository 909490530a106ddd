"""
Tagged field values.

A FieldValue pairs a Python value with an explicit FieldKind so renderers
dispatch on the kind instead of inspecting runtime types at render time.
"""

import numbers
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from ..core.errors import InvalidArgumentError, require
from ..core.numeric import to_decimal


class FieldKind(Enum):
    """Semantic type of a record field."""
    STRING = "string"
    INT = "int"
    DECIMAL = "decimal"
    BOOL = "bool"
    TIMESTAMP = "timestamp"


Scalar = Union[str, int, Decimal, float, bool, datetime, date]


@dataclass(frozen=True)
class FieldValue:
    """An immutable value tagged with its FieldKind."""
    kind: FieldKind
    value: Any

    @classmethod
    def of(cls, value: Scalar) -> "FieldValue":
        """
        Classify a Python value.

        Args:
            value: str, int, Decimal, float, bool, datetime or date

        Returns:
            FieldValue with the matching kind; floats are stored as Decimal
            and dates are promoted to midnight datetimes

        Raises:
            NullInputError: If value is None
            InvalidArgumentError: If the type is not supported
        """
        require(value, "value")

        if isinstance(value, FieldValue):
            return value
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls(FieldKind.BOOL, value)
        if isinstance(value, str):
            return cls(FieldKind.STRING, value)
        if isinstance(value, numbers.Integral):
            return cls(FieldKind.INT, int(value))
        if isinstance(value, (Decimal, float)):
            return cls(FieldKind.DECIMAL, to_decimal(value))
        if isinstance(value, datetime):
            return cls(FieldKind.TIMESTAMP, value)
        if isinstance(value, date):
            return cls(FieldKind.TIMESTAMP, datetime(value.year, value.month, value.day))

        raise InvalidArgumentError(
            f"Unsupported field value type: {type(value).__name__}", param="value"
        )

    @classmethod
    def string(cls, value: str) -> "FieldValue":
        return cls(FieldKind.STRING, str(require(value, "value")))

    @classmethod
    def integer(cls, value: int) -> "FieldValue":
        return cls(FieldKind.INT, int(require(value, "value")))

    @classmethod
    def decimal(cls, value: Union[Decimal, float, int]) -> "FieldValue":
        return cls(FieldKind.DECIMAL, to_decimal(require(value, "value")))

    @classmethod
    def boolean(cls, value: bool) -> "FieldValue":
        return cls(FieldKind.BOOL, bool(require(value, "value")))

    @classmethod
    def timestamp(cls, value: datetime) -> "FieldValue":
        return cls(FieldKind.TIMESTAMP, require(value, "value"))

    @property
    def is_numeric(self) -> bool:
        return self.kind in (FieldKind.INT, FieldKind.DECIMAL)

    @property
    def is_empty(self) -> bool:
        """True for an empty string; other kinds always carry a value."""
        return self.kind is FieldKind.STRING and self.value == ""
