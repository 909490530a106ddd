"""
Transport collaborators for rendered messages.

This module turns rendered text into transport artifacts: UTF-8 payloads
for byte-stream transmission, header-plus-lines export files, and message
columns for tabular data held in pandas DataFrames.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from ..core.errors import InvalidArgumentError, require, require_text
from ..records.dynamic import DynamicRecord
from .base import MessageBuilder

logger = logging.getLogger(__name__)

DATA_RECORD_HEADER = "Id,Name,Value"


def encode_payload(
    builder: MessageBuilder,
    record,
    encoding: str = "utf-8"
) -> bytes:
    """
    Render a record and encode it for transmission.

    Args:
        builder: Renderer producing the message text
        record: Record to render
        encoding: Text encoding (UTF-8 unless a peer needs otherwise)

    Returns:
        Encoded message bytes

    Raises:
        NullInputError: If builder or record is None
    """
    require(builder, "builder")
    require(record, "record")

    message = builder.build_message(record)
    return message.encode(encoding)


class MessageFileWriter:
    """
    Writes one header line followed by one rendered line per record.

    Lines end with the platform line terminator and the file is UTF-8
    encoded.
    """

    def __init__(
        self,
        builder: MessageBuilder,
        header: Optional[str] = DATA_RECORD_HEADER,
        encoding: str = "utf-8"
    ):
        """
        Initialize message file writer.

        Args:
            builder: Renderer used for each data line
            header: Header line, or None to write data lines only
            encoding: File encoding
        """
        self.builder = require(builder, "builder")
        self.header = header
        self.encoding = encoding
        logger.info(f"MessageFileWriter initialized: header={header!r}, encoding={encoding}")

    def write(self, records: Iterable, file_path: Union[str, Path]) -> Path:
        """
        Write records to a file, creating parent directories as needed.

        Args:
            records: Records to render, one line each
            file_path: Target path

        Returns:
            Path of the written file

        Raises:
            NullInputError: If records is None
            InvalidArgumentError: If file_path is blank or names a directory
        """
        require(records, "records")
        require_text(file_path, "file_path", "File path")

        # Path("") collapses to "."
        output_path = Path(file_path)
        if output_path == Path(".") or output_path.is_dir():
            raise InvalidArgumentError(
                f"File path must name a file, got {str(file_path)!r}", param="file_path"
            )
        output_path.parent.mkdir(parents=True, exist_ok=True)

        line_count = 0
        with open(output_path, "w", encoding=self.encoding, newline="") as handle:
            if self.header is not None:
                handle.write(self.header + os.linesep)
            for record in records:
                handle.write(self.builder.build_message(record) + os.linesep)
                line_count += 1

        logger.info(f"Wrote {line_count} messages to {output_path}")
        return output_path


def records_from_frame(frame: pd.DataFrame) -> List[DynamicRecord]:
    """
    Convert DataFrame rows to DynamicRecords.

    Column names become field names. Missing cells (NaN, None, NaT) are left
    out of the record so they render like absent fields.

    Raises:
        NullInputError: If frame is None
    """
    require(frame, "frame")

    records = []
    for row in frame.to_dict(orient="records"):
        record = DynamicRecord()
        for column, value in row.items():
            if _is_missing(value):
                continue
            if isinstance(value, pd.Timestamp):
                value = value.to_pydatetime()
            elif isinstance(value, np.generic):
                value = value.item()
            record.set(str(column), value)
        records.append(record)

    logger.debug(f"Converted {len(records)} frame rows to records")
    return records


def render_frame(frame: pd.DataFrame, builder: MessageBuilder) -> pd.Series:
    """
    Render every row of a DataFrame.

    Returns:
        Series of messages aligned with the frame index
    """
    require(builder, "builder")
    records = records_from_frame(frame)
    messages = [builder.build_message(record) for record in records]
    return pd.Series(messages, index=frame.index, dtype=object, name="message")


def _is_missing(value) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
