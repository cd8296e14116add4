"""
Configuration for fabricate, read from environment variables.

Settings:

- ``FABRICATE_LOG_LEVEL``: logging level name (default ``INFO``)
- ``FABRICATE_LOG_FORMAT``: logging format string
- ``FABRICATE_ID_START``: first identifier handed out by a new memory
  model repository (default ``1``)
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FabricateSettings(BaseModel):
    """Validated settings."""

    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    id_start: int = Field(default=1, ge=0)

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_upper_case(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("log_format")
    @classmethod
    def log_format_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Log format cannot be empty")
        return v


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
) -> FabricateSettings:
    """Build settings from the environment.

    Args:
        environ: Mapping to read from, ``os.environ`` when omitted

    Returns:
        FabricateSettings with unset variables left at their defaults

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    if environ is None:
        environ = os.environ

    values = {}
    for field_name in FabricateSettings.model_fields:
        env_name = f"FABRICATE_{field_name.upper()}"
        if env_name in environ:
            values[field_name] = environ[env_name]

    return FabricateSettings(**values)


def setup_logging(settings: Optional[FabricateSettings] = None) -> None:
    """Configure logging based on settings"""
    if settings is None:
        settings = load_settings()

    log_level = settings.log_level
    # Validate log level
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {log_level}, defaulting to INFO")
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=settings.log_format,
        force=True,  # Override any existing configuration
    )
    logger.info(
        "Logging configured",
        extra={"log_level": log_level, "numeric_level": numeric_level},
    )
