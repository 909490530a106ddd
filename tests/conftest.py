"""
Shared fixtures for msgforge tests.

Provides the reference records and schemas used across renderer,
exporter and service tests.
"""

from decimal import Decimal

import pytest

from msgforge.records.dynamic import DynamicRecord
from msgforge.records.models import ContainerStatusRecord, DataRecord
from msgforge.schema.tokens import MessageSchema


# =============================================================================
# Records
# =============================================================================

@pytest.fixture
def data_record() -> DataRecord:
    """Simple id/name/value record."""
    return DataRecord(id=1, name="TestItem", value=Decimal("123.45"))


@pytest.fixture
def scanned_container() -> ContainerStatusRecord:
    """Container status built from whole-number dimensions."""
    return ContainerStatusRecord.create(
        barcode="317164239",
        length=44,
        width=35,
        height=38,
        weight=13
    )


@pytest.fixture
def measured_container() -> ContainerStatusRecord:
    """Container status with fractional dimensions for column layouts."""
    return ContainerStatusRecord(
        status_type="CONTAINERSTATUS",
        barcode="317164239",
        status="SCANNED",
        dimension_type="DIMS",
        length=2.90,
        width=2.80,
        height=16.40,
        volume=131.31098,
        weight=0.08,
    )


@pytest.fixture
def container_dynamic_record() -> DynamicRecord:
    """Dynamic container record keyed the way client schemas expect."""
    return DynamicRecord({
        "ContainerId": "317164239",
        "Status": "SCANNED",
        "DimType": "DIMS",
        "Length": 44,
        "Width": 35,
        "Height": 38,
        "Volume": 57910,
        "Weight": 13,
    })


# =============================================================================
# Schemas
# =============================================================================

@pytest.fixture
def container_status_schema() -> MessageSchema:
    """Pipe-delimited container status schema with a literal prefix."""
    return MessageSchema.from_spec([
        "=CONTAINERSTATUS",
        "ContainerId",
        "Status",
        "DimType",
        "Length",
        "Width",
        "Height",
        "Volume",
        "Weight",
    ])


@pytest.fixture
def expected_container_message() -> str:
    return "CONTAINERSTATUS|317164239|SCANNED|DIMS|44|35|38|57910|13"
