"""
Dynamic records whose field set is decided by data at runtime.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..core.errors import require
from .values import FieldKind, FieldValue, Scalar

logger = logging.getLogger(__name__)


class DynamicRecord:
    """
    Mapping from field name to a tagged FieldValue.

    An absent key is distinct from a present empty string. Assigning None
    removes the key. Renderers only read records; they never mutate them.

        >>> record = DynamicRecord()
        >>> record.set("ContainerId", "317164239")
        >>> record.set("Weight", 13)
        >>> record["Weight"]
        13
    """

    def __init__(self, values: Optional[Mapping[str, Scalar]] = None):
        self._fields: Dict[str, FieldValue] = {}
        if values:
            for key, value in values.items():
                self.set(key, value)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Scalar]) -> "DynamicRecord":
        """Build a record from a plain mapping (None values are skipped)."""
        return cls(require(values, "values"))

    def set(self, key: str, value: Optional[Scalar]) -> None:
        """
        Set a field value.

        Args:
            key: Field name
            value: Supported scalar or FieldValue; None removes the key

        Raises:
            NullInputError: If key is None
            InvalidArgumentError: If the value type is not supported
        """
        require(key, "key")
        if value is None:
            self._fields.pop(key, None)
            return
        self._fields[key] = FieldValue.of(value)

    def get(self, key: str, default: Any = None) -> Any:
        """Get the raw value of a field, or default if absent."""
        field_value = self._fields.get(key)
        return field_value.value if field_value is not None else default

    def get_field(self, key: str) -> Optional[FieldValue]:
        """Get the tagged value of a field, or None if absent."""
        return self._fields.get(key)

    def get_as(self, key: str, kind: FieldKind, default: Any = None) -> Any:
        """
        Get a field converted to another kind.

        Args:
            key: Field name
            kind: Target kind
            default: Returned when the key is absent or conversion fails

        Returns:
            Converted value or default
        """
        field_value = self._fields.get(key)
        if field_value is None:
            return default
        if field_value.kind is kind:
            return field_value.value

        try:
            return _convert(field_value, kind)
        except (ValueError, TypeError, ArithmeticError) as e:
            logger.debug(f"Cannot convert field '{key}' to {kind.value}: {e}")
            return default

    def remove(self, key: str) -> bool:
        """Remove a field; returns True if it was present."""
        return self._fields.pop(key, None) is not None

    def keys(self) -> List[str]:
        return list(self._fields.keys())

    def items(self):
        return self._fields.items()

    def copy(self) -> "DynamicRecord":
        clone = DynamicRecord()
        clone._fields = dict(self._fields)
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """Raw values keyed by field name."""
        return {key: field_value.value for key, field_value in self._fields.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Optional[Scalar]) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self._fields.pop(key, None)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DynamicRecord):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"DynamicRecord({self.to_dict()!r})"


def _convert(field_value: FieldValue, kind: FieldKind) -> Any:
    """Convert a tagged value to another kind; raises on failure."""
    value = field_value.value

    if kind is FieldKind.STRING:
        return str(value)
    if kind is FieldKind.INT:
        if field_value.kind is FieldKind.TIMESTAMP:
            raise TypeError("timestamp cannot be converted to int")
        return int(Decimal(str(value)) if isinstance(value, str) else value)
    if kind is FieldKind.DECIMAL:
        if field_value.kind is FieldKind.TIMESTAMP:
            raise TypeError("timestamp cannot be converted to decimal")
        return Decimal(int(value)) if isinstance(value, bool) else Decimal(str(value))
    if kind is FieldKind.BOOL:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("true", "false"):
                return lowered == "true"
            raise ValueError(f"not a boolean: {value!r}")
        if field_value.kind is FieldKind.TIMESTAMP:
            raise TypeError("timestamp cannot be converted to bool")
        return bool(value)
    if kind is FieldKind.TIMESTAMP:
        if isinstance(value, str):
            return datetime.fromisoformat(value)
        raise TypeError(f"{field_value.kind.value} cannot be converted to timestamp")

    raise ValueError(f"Unknown field kind: {kind}")
