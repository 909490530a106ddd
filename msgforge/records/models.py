"""
Fixed-shape records.

Each record type declares its wire fields explicitly in FIELDS, in output
order, so renderers never reflect over attributes.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Dict, Tuple

from ..core.errors import require
from .dynamic import DynamicRecord
from .values import FieldKind, FieldValue

STATUS_TYPE_CONTAINER = "CONTAINERSTATUS"
STATUS_SCANNED = "SCANNED"
DIMENSION_TYPE_DIMS = "DIMS"


@dataclass(frozen=True)
class FieldDescriptor:
    """Describes one wire field of a fixed-shape record."""
    name: str  # Name used in messages, headers and width maps
    attribute: str
    kind: FieldKind


class FixedRecord:
    """Base for records with a declared field list."""

    FIELDS: ClassVar[Tuple[FieldDescriptor, ...]] = ()

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(descriptor.name for descriptor in cls.FIELDS)

    def field_values(self) -> Dict[str, FieldValue]:
        """
        Tagged values keyed by wire name, in declared order.

        None attributes are left out, the same as absent dynamic fields.
        """
        values = {}
        for descriptor in self.FIELDS:
            raw = getattr(self, descriptor.attribute)
            if raw is None:
                continue
            values[descriptor.name] = _tag(descriptor.kind, raw)
        return values

    def to_dynamic(self) -> DynamicRecord:
        """Copy the record's fields into a DynamicRecord."""
        record = DynamicRecord()
        for name, field_value in self.field_values().items():
            record.set(name, field_value)
        return record


def _tag(kind: FieldKind, raw) -> FieldValue:
    if kind is FieldKind.STRING:
        return FieldValue.string(raw)
    if kind is FieldKind.INT:
        return FieldValue.integer(raw)
    if kind is FieldKind.DECIMAL:
        return FieldValue.decimal(raw)
    if kind is FieldKind.BOOL:
        return FieldValue.boolean(raw)
    return FieldValue.timestamp(raw)


@dataclass
class DataRecord(FixedRecord):
    """Simple id/name/value record written to CSV exports."""
    id: int = 0
    name: str = ""
    value: Decimal = Decimal("0")

    FIELDS: ClassVar[Tuple[FieldDescriptor, ...]] = (
        FieldDescriptor("Id", "id", FieldKind.INT),
        FieldDescriptor("Name", "name", FieldKind.STRING),
        FieldDescriptor("Value", "value", FieldKind.DECIMAL),
    )


@dataclass
class ContainerStatusRecord(FixedRecord):
    """Container scan result with dimensions, volume and weight."""
    status_type: str = ""
    barcode: str = ""
    status: str = ""
    dimension_type: str = ""
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    volume: float = 0.0
    weight: float = 0.0

    FIELDS: ClassVar[Tuple[FieldDescriptor, ...]] = (
        FieldDescriptor("StatusType", "status_type", FieldKind.STRING),
        FieldDescriptor("Barcode", "barcode", FieldKind.STRING),
        FieldDescriptor("Status", "status", FieldKind.STRING),
        FieldDescriptor("DimensionType", "dimension_type", FieldKind.STRING),
        FieldDescriptor("Length", "length", FieldKind.DECIMAL),
        FieldDescriptor("Width", "width", FieldKind.DECIMAL),
        FieldDescriptor("Height", "height", FieldKind.DECIMAL),
        FieldDescriptor("Volume", "volume", FieldKind.DECIMAL),
        FieldDescriptor("Weight", "weight", FieldKind.DECIMAL),
    )

    @classmethod
    def create(
        cls,
        barcode: str,
        length: float,
        width: float,
        height: float,
        weight: float
    ) -> "ContainerStatusRecord":
        """
        Create a scanned container status with volume = length * width * height.

        Raises:
            NullInputError: If barcode is None
        """
        require(barcode, "barcode")
        return cls(
            status_type=STATUS_TYPE_CONTAINER,
            barcode=barcode,
            status=STATUS_SCANNED,
            dimension_type=DIMENSION_TYPE_DIMS,
            length=length,
            width=width,
            height=height,
            volume=length * width * height,
            weight=weight,
        )
