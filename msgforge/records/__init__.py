"""
Record types consumed by the renderers.
"""

from .values import FieldKind, FieldValue
from .dynamic import DynamicRecord
from .models import FieldDescriptor, FixedRecord, DataRecord, ContainerStatusRecord

__all__ = [
    "FieldKind",
    "FieldValue",
    "DynamicRecord",
    "FieldDescriptor",
    "FixedRecord",
    "DataRecord",
    "ContainerStatusRecord",
]
