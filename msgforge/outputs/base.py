"""
Shared rendering contract and per-kind value formatting.
"""

from decimal import Decimal
from typing import Dict, Mapping, Optional, Protocol, TypeVar, Union, runtime_checkable

from ..core.errors import InvalidArgumentError
from ..core.locale import Locale
from ..core.numeric import NumericFormatter, render_decimal
from ..records.dynamic import DynamicRecord
from ..records.models import FixedRecord
from ..records.values import FieldKind, FieldValue

R = TypeVar("R", contravariant=True)

AnyRecord = Union[FixedRecord, DynamicRecord]


@runtime_checkable
class MessageBuilder(Protocol[R]):
    """Anything that renders a record into message text."""

    def build_message(self, record: R) -> str:
        ...


def format_field_value(
    field_value: FieldValue,
    formatter: Optional[NumericFormatter],
    locale: Locale
) -> str:
    """
    Render one tagged value as text.

    DECIMAL values go through the formatter when one is given, otherwise
    they keep their own precision. Integers are never scaled.

    Args:
        field_value: Value to render
        formatter: Optional numeric formatter for DECIMAL values
        locale: Locale for separators and timestamps

    Returns:
        Rendered text (never None)
    """
    kind = field_value.kind
    value = field_value.value

    if kind is FieldKind.STRING:
        return value
    if kind is FieldKind.INT:
        return str(value)
    if kind is FieldKind.DECIMAL:
        if formatter is not None:
            return formatter.format(value, locale)
        return render_decimal(Decimal(value), None, locale)
    if kind is FieldKind.BOOL:
        return "True" if value else "False"
    if kind is FieldKind.TIMESTAMP:
        return value.strftime(locale.timestamp_format)

    raise InvalidArgumentError(f"Unsupported field kind: {kind}", param="field_value")


def record_fields(record: AnyRecord) -> Mapping[str, FieldValue]:
    """
    Tagged field values of a fixed-shape or dynamic record.

    Raises:
        InvalidArgumentError: If record is neither kind
    """
    if isinstance(record, DynamicRecord):
        return _DynamicFieldView(record)
    if isinstance(record, FixedRecord):
        return record.field_values()
    raise InvalidArgumentError(
        f"Unsupported record type: {type(record).__name__}", param="record"
    )


class _DynamicFieldView(Mapping):
    """Read-only FieldValue view over a DynamicRecord."""

    def __init__(self, record: DynamicRecord):
        self._record = record

    def __getitem__(self, key: str) -> FieldValue:
        field_value = self._record.get_field(key)
        if field_value is None:
            raise KeyError(key)
        return field_value

    def get(self, key, default=None):
        field_value = self._record.get_field(key)
        return default if field_value is None else field_value

    def __contains__(self, key) -> bool:
        return key in self._record

    def __iter__(self):
        return iter(self._record)

    def __len__(self) -> int:
        return len(self._record)


def format_fields(
    fields: Mapping[str, FieldValue],
    formatter: Optional[NumericFormatter],
    locale: Locale
) -> Dict[str, str]:
    """Render every field of a mapping, preserving order."""
    return {
        name: format_field_value(field_value, formatter, locale)
        for name, field_value in fields.items()
    }
