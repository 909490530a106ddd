"""
Runtime settings for message rendering.

Settings can be built directly, from a dict, or from MSGFORGE_* environment
variables:

    MSGFORGE_DECIMAL_PLACES=2
    MSGFORGE_ROUNDING_MODE=round_up
    MSGFORGE_LOCALE=de-DE
    MSGFORGE_DELIMITER=|
    MSGFORGE_LOG_LEVEL=DEBUG
"""

import logging
import os
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .locale import Locale, get_locale
from .numeric import MAX_DECIMAL_PLACES, MIN_DECIMAL_PLACES, NumericFormatter, RoundingMode
from ..schema.registry import FormatRegistry
from ..schema.tokens import MessageSchema

logger = logging.getLogger(__name__)

ENV_PREFIX = "MSGFORGE_"


class RenderSettings(BaseModel):
    """Validated rendering configuration."""

    decimal_places: int = Field(default=0, ge=MIN_DECIMAL_PLACES, le=MAX_DECIMAL_PLACES)
    rounding_mode: RoundingMode = RoundingMode.TRUNCATE
    locale: str = "invariant"
    delimiter: str = "|"
    log_level: str = "INFO"
    grouping: bool = False

    # Client id -> token specs, e.g. {"acme": ["=CONTAINERSTATUS", "ContainerId"]}
    client_formats: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("rounding_mode", mode="before")
    @classmethod
    def _parse_rounding_mode(cls, value):
        if isinstance(value, str):
            return value.strip().lower().replace("-", "_")
        return value

    @field_validator("locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        get_locale(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, **overrides) -> "RenderSettings":
        """
        Build settings from environment variables.

        Args:
            prefix: Environment variable prefix
            **overrides: Values that win over the environment

        Raises:
            pydantic.ValidationError: If a value is invalid
        """
        values = {}
        for name in ("decimal_places", "rounding_mode", "locale", "delimiter", "log_level", "grouping"):
            raw = os.getenv(f"{prefix}{name.upper()}")
            if raw is not None:
                values[name] = raw
        values.update(overrides)

        settings = cls(**values)
        logger.debug(f"RenderSettings loaded from environment: {settings.model_dump()}")
        return settings

    def numeric_formatter(self) -> NumericFormatter:
        return NumericFormatter(self.decimal_places, self.rounding_mode, grouping=self.grouping)

    def resolve_locale(self) -> Locale:
        return get_locale(self.locale)

    def build_registry(self, registry: Optional[FormatRegistry] = None) -> FormatRegistry:
        """
        Register every configured client format.

        Args:
            registry: Registry to populate (a new one if None)

        Returns:
            The populated registry
        """
        registry = registry if registry is not None else FormatRegistry()
        for client_id, specs in self.client_formats.items():
            registry.set(client_id, MessageSchema.from_spec(specs, self.delimiter))

        logger.info(f"Registered {len(self.client_formats)} configured client formats")
        return registry
