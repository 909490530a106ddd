"""
Delimited rendering of fixed-shape records.
"""

import logging
from typing import Optional

from ..core.errors import require
from ..core.locale import INVARIANT, Locale
from ..core.numeric import NumericFormatter, RoundingMode
from ..records.models import FixedRecord
from .base import format_fields

logger = logging.getLogger(__name__)


class DelimitedRenderer:
    """
    Joins a fixed-shape record's declared fields with a delimiter.

    Delimiters inside string values are emitted as-is; the format has no
    escaping.

        >>> DelimitedRenderer(",").render(DataRecord(1, "TestItem", Decimal("123.45")))
        '1,TestItem,123.45'
    """

    def __init__(
        self,
        delimiter: str = ",",
        numeric_formatter: Optional[NumericFormatter] = None,
        locale: Locale = INVARIANT
    ):
        """
        Initialize delimited renderer.

        Args:
            delimiter: Text placed between fields
            numeric_formatter: Formatter for decimal fields; when None the
                locale default conversion is used
            locale: Locale for separators and timestamps

        Raises:
            NullInputError: If delimiter or locale is None
        """
        self.delimiter = require(delimiter, "delimiter")
        self.locale = require(locale, "locale")
        self.numeric_formatter = numeric_formatter
        logger.debug(f"DelimitedRenderer initialized: delimiter={delimiter!r}")

    @classmethod
    def for_container_status(
        cls,
        delimiter: str = "|",
        numeric_formatter: Optional[NumericFormatter] = None,
        locale: Locale = INVARIANT
    ) -> "DelimitedRenderer":
        """Renderer for container status messages (whole-number truncation by default)."""
        return cls(
            delimiter,
            numeric_formatter or NumericFormatter(0, RoundingMode.TRUNCATE),
            locale
        )

    def render(self, record: FixedRecord) -> str:
        """
        Render a record as delimited text.

        Raises:
            NullInputError: If record is None
        """
        require(record, "record")
        values = format_fields(record.field_values(), self.numeric_formatter, self.locale)

        # None attributes still occupy their position
        pieces = [values.get(name, "") for name in record.field_names()]
        return self.delimiter.join(pieces)

    def build_message(self, record: FixedRecord) -> str:
        return self.render(record)
