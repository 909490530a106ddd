"""
Message schemas and the client format registry.
"""

from .tokens import FormatToken, MessageSchema, DEFAULT_DELIMITER
from .registry import FormatRegistry

__all__ = [
    "FormatToken",
    "MessageSchema",
    "DEFAULT_DELIMITER",
    "FormatRegistry",
]
