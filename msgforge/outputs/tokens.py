"""
Schema-driven rendering of dynamic records.

The same DynamicRecord can be rendered under any number of client schemas
without rebuilding it.
"""

import logging
from typing import List, Optional

from ..core.errors import NullInputError, require
from ..core.locale import INVARIANT, Locale
from ..core.numeric import NumericFormatter
from ..schema.tokens import MessageSchema
from .base import AnyRecord, format_field_value, record_fields

logger = logging.getLogger(__name__)


class TokenRenderer:
    """
    Renders records against a MessageSchema.

    Literal tokens emit their text, key tokens emit the formatted field
    value, and keys missing from the record emit an empty field.
    """

    def __init__(
        self,
        schema: Optional[MessageSchema] = None,
        numeric_formatter: Optional[NumericFormatter] = None,
        locale: Locale = INVARIANT
    ):
        """
        Initialize token renderer.

        Args:
            schema: Schema used by build_message (render takes its own)
            numeric_formatter: Formatter for decimal fields
            locale: Locale for separators and timestamps
        """
        self.schema = schema
        self.numeric_formatter = numeric_formatter
        self.locale = require(locale, "locale")
        logger.debug(
            f"TokenRenderer initialized: "
            f"tokens={len(schema) if schema is not None else 0}"
        )

    def render(self, schema: MessageSchema, record: AnyRecord) -> str:
        """
        Render a record under a schema.

        Args:
            schema: Token order and delimiter
            record: DynamicRecord (or fixed-shape record, by wire name)

        Returns:
            Rendered pieces joined by the schema delimiter

        Raises:
            NullInputError: If schema or record is None
        """
        require(schema, "schema")
        require(record, "record")

        fields = record_fields(record)
        pieces: List[str] = []

        for token in schema.tokens:
            if token.is_literal:
                pieces.append(token.literal)
                continue

            field_value = fields.get(token.key)
            if field_value is None:
                pieces.append("")
            else:
                pieces.append(format_field_value(field_value, self.numeric_formatter, self.locale))

        return schema.delimiter.join(pieces)

    def build_message(self, record: AnyRecord) -> str:
        """Render with the schema bound at construction."""
        if self.schema is None:
            raise NullInputError("schema", "TokenRenderer has no schema bound")
        return self.render(self.schema, record)
