"""
Fixed-width positional rendering.

Every field occupies a declared column width: text is right-justified,
padded on the left with spaces, and cut to its leftmost `width` characters
when it overflows. Columns are concatenated without separators.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Tuple, Type

from ..core.errors import InvalidArgumentError, require
from ..core.locale import INVARIANT, Locale
from ..core.numeric import NumericFormatter, RoundingMode
from ..records.models import FixedRecord
from .base import AnyRecord, format_field_value, record_fields

logger = logging.getLogger(__name__)

BLANK_FIELD = "Blank"


class DefaultWidths:
    """Column widths of the container status layout."""
    WEIGHT = 10
    VOLUME = 9
    BARCODE = 12
    BLANK = 9
    LENGTH = 10
    WIDTH = 10
    HEIGHT = 10


def fit_column(text: str, width: int) -> str:
    """Right-justify text in width, keeping the leftmost characters on overflow."""
    if len(text) > width:
        return text[:width]
    return text.rjust(width)


def _validate_layout(field_order: Sequence[str], width_map: Mapping[str, int]) -> None:
    require(field_order, "field_order")
    require(width_map, "width_map")

    if len(field_order) == 0:
        raise InvalidArgumentError("Field order cannot be empty", param="field_order")
    if len(width_map) == 0:
        raise InvalidArgumentError("Width map cannot be empty", param="width_map")

    for name, width in width_map.items():
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise InvalidArgumentError(
                f"Column width for '{name}' must be a positive integer, got {width!r}",
                param="width_map"
            )


@dataclass(frozen=True)
class ColumnLayout:
    """Field order plus the width of each column."""
    field_order: Tuple[str, ...]
    widths: Mapping[str, int]

    def __init__(self, field_order: Sequence[str], widths: Mapping[str, int]):
        _validate_layout(field_order, widths)
        object.__setattr__(self, "field_order", tuple(field_order))
        object.__setattr__(self, "widths", dict(widths))

    @classmethod
    def for_record_type(
        cls,
        record_type: Type[FixedRecord],
        widths: Mapping[str, int]
    ) -> "ColumnLayout":
        """Layout that follows a fixed-shape record's declared field order."""
        require(widths, "widths")
        order = [name for name in record_type.field_names() if name in widths]
        return cls(order, widths)

    @property
    def total_width(self) -> int:
        """Rendered line length: widths of the fields named in the order."""
        return sum(self.widths[name] for name in self.field_order if name in self.widths)

    def __hash__(self) -> int:
        return hash((self.field_order, tuple(sorted(self.widths.items()))))


CONTAINER_STATUS_LAYOUT = ColumnLayout(
    ["Weight", "Volume", "Barcode", BLANK_FIELD, "Length", "Width", "Height"],
    {
        "Weight": DefaultWidths.WEIGHT,
        "Volume": DefaultWidths.VOLUME,
        "Barcode": DefaultWidths.BARCODE,
        BLANK_FIELD: DefaultWidths.BLANK,
        "Length": DefaultWidths.LENGTH,
        "Width": DefaultWidths.WIDTH,
        "Height": DefaultWidths.HEIGHT,
    },
)


class ColumnLayoutRenderer:
    """
    Renders fixed-shape or dynamic records into fixed-width text.

    Decimal fields go through the numeric formatter (two places, truncated,
    unless configured otherwise).
    """

    def __init__(
        self,
        layout: Optional[ColumnLayout] = None,
        numeric_formatter: Optional[NumericFormatter] = None,
        locale: Locale = INVARIANT
    ):
        """
        Initialize column layout renderer.

        Args:
            layout: Layout used by build_message (defaults to the container
                status layout)
            numeric_formatter: Formatter for decimal fields
            locale: Locale for separators and timestamps
        """
        self.layout = layout or CONTAINER_STATUS_LAYOUT
        self.numeric_formatter = numeric_formatter or NumericFormatter(2, RoundingMode.TRUNCATE)
        self.locale = require(locale, "locale")
        logger.debug(
            f"ColumnLayoutRenderer initialized: {len(self.layout.field_order)} columns, "
            f"{self.layout.total_width} characters"
        )

    def render(
        self,
        record: AnyRecord,
        field_order: Sequence[str],
        width_map: Mapping[str, int]
    ) -> str:
        """
        Render a record into fixed-width columns.

        Args:
            record: Record supplying the values
            field_order: Column order; names without a width are skipped
            width_map: Column width per field name

        Returns:
            Concatenated columns

        Raises:
            NullInputError: If record, field_order or width_map is None
            InvalidArgumentError: If field_order or width_map is empty, or a
                width is not a positive integer
        """
        require(record, "record")
        _validate_layout(field_order, width_map)

        fields = record_fields(record)
        columns = []

        for name in field_order:
            width = width_map.get(name)
            if width is None:
                continue

            if name == BLANK_FIELD:
                columns.append(" " * width)
                continue

            field_value = fields.get(name)
            if field_value is None:
                columns.append(" " * width)
                continue

            text = format_field_value(field_value, self.numeric_formatter, self.locale)
            columns.append(fit_column(text, width))

        return "".join(columns)

    def render_layout(self, record: AnyRecord, layout: ColumnLayout) -> str:
        require(layout, "layout")
        return self.render(record, layout.field_order, layout.widths)

    def build_message(self, record: AnyRecord) -> str:
        """Render with the layout bound at construction."""
        return self.render_layout(record, self.layout)
