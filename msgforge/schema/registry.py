"""
Client-specific message schemas.

The registry is the only shared mutable state in msgforge. Every operation
holds a single lock, so concurrent callers always observe some completed
write.
"""

import logging
from threading import Lock
from typing import Dict, List, Optional

from ..core.errors import FormatNotFoundError, require, require_text
from .tokens import MessageSchema

logger = logging.getLogger(__name__)


class FormatRegistry:
    """
    Maps client ids to the MessageSchema each client expects.

        >>> registry = FormatRegistry()
        >>> registry.register("client-a", schema)
        True
        >>> registry.register("client-a", other_schema)
        False
    """

    def __init__(self):
        self._formats: Dict[str, MessageSchema] = {}
        self._lock = Lock()
        logger.debug("FormatRegistry initialized")

    def register(self, client_id: str, schema: MessageSchema) -> bool:
        """
        Register a schema for a client if none is bound yet.

        Returns:
            True if registered, False if the client already had a schema
            (the existing schema is kept)

        Raises:
            InvalidArgumentError: If client_id is blank
            NullInputError: If schema is None
        """
        _check_client_id(client_id)
        require(schema, "schema")

        with self._lock:
            if client_id in self._formats:
                logger.debug(f"Format already registered for client: {client_id}")
                return False
            self._formats[client_id] = schema

        logger.info(f"Registered message format for client: {client_id}")
        return True

    def set(self, client_id: str, schema: MessageSchema) -> None:
        """Bind a schema to a client, replacing any existing one."""
        _check_client_id(client_id)
        require(schema, "schema")

        with self._lock:
            self._formats[client_id] = schema

        logger.info(f"Set message format for client: {client_id}")

    def get(self, client_id: str) -> Optional[MessageSchema]:
        """Get the schema for a client, or None if none is registered."""
        _check_client_id(client_id)
        with self._lock:
            return self._formats.get(client_id)

    def require(self, client_id: str) -> MessageSchema:
        """
        Get the schema for a client.

        Raises:
            FormatNotFoundError: If no schema is registered for client_id
        """
        schema = self.get(client_id)
        if schema is None:
            raise FormatNotFoundError(client_id)
        return schema

    def has(self, client_id: str) -> bool:
        _check_client_id(client_id)
        with self._lock:
            return client_id in self._formats

    def remove(self, client_id: str) -> bool:
        """Remove a client's schema; returns False if none was registered."""
        _check_client_id(client_id)
        with self._lock:
            removed = self._formats.pop(client_id, None) is not None

        if removed:
            logger.info(f"Removed message format for client: {client_id}")
        return removed

    def client_ids(self) -> List[str]:
        """Snapshot of registered client ids."""
        with self._lock:
            return list(self._formats.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._formats)


def _check_client_id(client_id: str) -> None:
    require_text(client_id, "client_id", "Client ID")
