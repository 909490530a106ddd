"""
Processor services that pair a renderer with a transport collaborator.

Each service renders records and hands back transport artifacts: UTF-8
payload bytes for byte-stream transmission or an export file on disk.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ..core.config import RenderSettings
from ..core.errors import require, require_text
from ..core.locale import INVARIANT, Locale
from ..core.numeric import NumericFormatter, RoundingMode
from ..outputs.base import MessageBuilder
from ..outputs.columns import ColumnLayoutRenderer
from ..outputs.exporters import MessageFileWriter, encode_payload
from ..outputs.tokens import TokenRenderer
from ..records.dynamic import DynamicRecord
from ..records.models import ContainerStatusRecord, DataRecord
from ..schema.registry import FormatRegistry

logger = logging.getLogger(__name__)


class DataProcessorService:
    """Payloads and CSV export for DataRecords."""

    def __init__(self, builder: MessageBuilder, file_writer: MessageFileWriter):
        self.builder = require(builder, "builder")
        self.file_writer = require(file_writer, "file_writer")
        logger.info("DataProcessorService initialized")

    def get_tcp_payload(self, record: DataRecord) -> bytes:
        """UTF-8 bytes of the rendered record."""
        require(record, "record")
        return encode_payload(self.builder, record)

    def write_data_file(self, records: Iterable[DataRecord], path: Union[str, Path]) -> Path:
        """
        Write records to a file through the configured writer.

        Raises:
            NullInputError: If records is None
            InvalidArgumentError: If path is blank
        """
        require(records, "records")
        require_text(path, "path", "Path")
        return self.file_writer.write(records, path)


class ContainerStatusProcessorService:
    """Payloads for container status records rendered by any builder."""

    def __init__(self, builder: MessageBuilder):
        self.builder = require(builder, "builder")
        logger.info("ContainerStatusProcessorService initialized")

    def get_tcp_payload(self, record: ContainerStatusRecord) -> bytes:
        require(record, "record")
        return encode_payload(self.builder, record)

    def create_container_status(
        self,
        barcode: str,
        length: float,
        width: float,
        height: float,
        weight: float
    ) -> ContainerStatusRecord:
        """Scanned container status with volume computed from the dimensions."""
        return ContainerStatusRecord.create(barcode, length, width, height, weight)


class FixedWidthContainerProcessorService(ContainerStatusProcessorService):
    """
    Container status processing with the fixed-width column layout.

    Columns: Weight(10) Volume(9) Barcode(12) Blank(9) Length(10) Width(10)
    Height(10).
    """

    def __init__(
        self,
        decimal_places: int = 2,
        rounding_mode: RoundingMode = RoundingMode.TRUNCATE,
        locale: Optional[Locale] = None
    ):
        """
        Initialize fixed-width container processor.

        Args:
            decimal_places: Number of decimal places (0-3)
            rounding_mode: Rounding mode to use
            locale: Locale for separators (invariant if None)

        Raises:
            InvalidRangeError: If decimal_places is outside 0-3
        """
        renderer = ColumnLayoutRenderer(
            numeric_formatter=NumericFormatter(decimal_places, rounding_mode),
            locale=locale or INVARIANT
        )
        super().__init__(renderer)

    def get_formatted_message(self, record: ContainerStatusRecord) -> str:
        require(record, "record")
        return self.builder.build_message(record)


class FlexibleProcessorService:
    """
    Renders dynamic records with the schema registered for each client.

        >>> service = FlexibleProcessorService(registry)
        >>> service.get_message("acme", record)
        'CONTAINERSTATUS|317164239|SCANNED|DIMS|44|35|38|57910|13'
    """

    def __init__(
        self,
        registry: FormatRegistry,
        numeric_formatter: Optional[NumericFormatter] = None,
        locale: Locale = INVARIANT
    ):
        """
        Initialize flexible processor.

        Args:
            registry: Client format registry
            numeric_formatter: Formatter for decimal fields (whole-number
                truncation if None)
            locale: Locale for separators and timestamps
        """
        self.registry = require(registry, "registry")
        self.numeric_formatter = numeric_formatter or NumericFormatter(0, RoundingMode.TRUNCATE)
        self.locale = require(locale, "locale")
        self._renderer = TokenRenderer(numeric_formatter=self.numeric_formatter, locale=self.locale)
        logger.info("FlexibleProcessorService initialized")

    @classmethod
    def from_settings(
        cls,
        settings: RenderSettings,
        registry: Optional[FormatRegistry] = None
    ) -> "FlexibleProcessorService":
        """Service whose formatter, locale and client formats come from settings."""
        require(settings, "settings")
        return cls(
            settings.build_registry(registry),
            settings.numeric_formatter(),
            settings.resolve_locale()
        )

    def get_message(self, client_id: str, record: DynamicRecord) -> str:
        """
        Render a record with the client's schema.

        Raises:
            NullInputError: If record is None
            FormatNotFoundError: If the client has no registered schema
        """
        require(record, "record")
        schema = self.registry.require(client_id)
        return self._renderer.render(schema, record)

    def get_tcp_payload(self, client_id: str, record: DynamicRecord) -> bytes:
        """UTF-8 bytes of the client-specific message."""
        return self.get_message(client_id, record).encode("utf-8")
