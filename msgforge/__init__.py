"""
msgforge - render records into delimited and fixed-width text messages.

Turn in-memory records into transport-ready text with per-client message
shapes, directional rounding rules and positional column layouts.

Quick Start:
    >>> from msgforge import DynamicRecord, MessageSchema, TokenRenderer
    >>> schema = MessageSchema.from_spec(["=CONTAINERSTATUS", "ContainerId", "Weight"])
    >>> TokenRenderer(schema).build_message(DynamicRecord({"ContainerId": "317164239", "Weight": 13}))
    'CONTAINERSTATUS|317164239|13'

Components:
- msgforge.core: Numeric formatting, locales, errors, settings
- msgforge.records: Dynamic and fixed-shape records
- msgforge.schema: Message schemas and the client format registry
- msgforge.outputs: Delimited, token and column renderers; payload and file export
- msgforge.services: Processor services for each record family
"""

__version__ = "0.1.0"
__author__ = "msgforge Team"
__package_name__ = "msgforge"

# Core
from .core.errors import (
    MessageFormatError,
    InvalidArgumentError,
    NullInputError,
    InvalidRangeError,
    FormatNotFoundError,
)
from .core.locale import Locale, INVARIANT, get_locale
from .core.numeric import NumericFormatter, RoundingMode

# Records
from .records.values import FieldKind, FieldValue
from .records.dynamic import DynamicRecord
from .records.models import FieldDescriptor, DataRecord, ContainerStatusRecord

# Schemas
from .schema.tokens import FormatToken, MessageSchema
from .schema.registry import FormatRegistry

# Renderers and collaborators
from .outputs.base import MessageBuilder
from .outputs.delimited import DelimitedRenderer
from .outputs.tokens import TokenRenderer
from .outputs.columns import ColumnLayout, ColumnLayoutRenderer, CONTAINER_STATUS_LAYOUT
from .outputs.exporters import MessageFileWriter, encode_payload, render_frame

# Settings and services
from .core.config import RenderSettings
from .services.processors import (
    DataProcessorService,
    ContainerStatusProcessorService,
    FixedWidthContainerProcessorService,
    FlexibleProcessorService,
)
from .monitoring import setup_logging


__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__package_name__",
    # Errors
    "MessageFormatError",
    "InvalidArgumentError",
    "NullInputError",
    "InvalidRangeError",
    "FormatNotFoundError",
    # Numeric formatting
    "Locale",
    "INVARIANT",
    "get_locale",
    "NumericFormatter",
    "RoundingMode",
    # Records
    "FieldKind",
    "FieldValue",
    "DynamicRecord",
    "FieldDescriptor",
    "DataRecord",
    "ContainerStatusRecord",
    # Schemas
    "FormatToken",
    "MessageSchema",
    "FormatRegistry",
    # Renderers
    "MessageBuilder",
    "DelimitedRenderer",
    "TokenRenderer",
    "ColumnLayout",
    "ColumnLayoutRenderer",
    "CONTAINER_STATUS_LAYOUT",
    "MessageFileWriter",
    "encode_payload",
    "render_frame",
    # Settings and services
    "RenderSettings",
    "DataProcessorService",
    "ContainerStatusProcessorService",
    "FixedWidthContainerProcessorService",
    "FlexibleProcessorService",
    "setup_logging",
]
