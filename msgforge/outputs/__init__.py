"""
Renderers and transport collaborators.

Every renderer implements the MessageBuilder contract (`build_message`),
which the payload encoder and file writer consume.
"""

from .base import MessageBuilder, format_field_value
from .delimited import DelimitedRenderer
from .tokens import TokenRenderer
from .columns import (
    BLANK_FIELD,
    CONTAINER_STATUS_LAYOUT,
    ColumnLayout,
    ColumnLayoutRenderer,
    DefaultWidths,
)
from .exporters import (
    DATA_RECORD_HEADER,
    MessageFileWriter,
    encode_payload,
    records_from_frame,
    render_frame,
)

__all__ = [
    "MessageBuilder",
    "format_field_value",
    "DelimitedRenderer",
    "TokenRenderer",
    "BLANK_FIELD",
    "CONTAINER_STATUS_LAYOUT",
    "ColumnLayout",
    "ColumnLayoutRenderer",
    "DefaultWidths",
    "DATA_RECORD_HEADER",
    "MessageFileWriter",
    "encode_payload",
    "records_from_frame",
    "render_frame",
]
