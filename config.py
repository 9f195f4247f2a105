"""
Application configuration.

Settings are Pydantic models with defaults, overridable through environment
variables. ``get_settings()`` builds them once per process.
"""

import logging
import os
from functools import lru_cache
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from core.constants import ImageConstants
from core.enums import CompressionLevel, OutputFormat
from schemas.common import OutputConfig


class SystemConfig(BaseModel):
    """Logging and debug settings"""

    log_level: str = Field(default="INFO", description="Root log level")
    debug: bool = Field(default=False, description="Enable auto-reload and verbose errors")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class APIConfig(BaseModel):
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class OutputSettings(BaseModel):
    """Default output encoding for results"""

    format: OutputFormat = OutputFormat.PNG
    compression_level: CompressionLevel = CompressionLevel.DEFAULT

    def to_output_config(self) -> OutputConfig:
        return OutputConfig(format=self.format, compression_level=self.compression_level)


class ImageLimits(BaseModel):
    """Input limits enforced by the API layer"""

    max_upload_mb: int = Field(
        default=ImageConstants.DEFAULT_MAX_UPLOAD_MB,
        ge=ImageConstants.MIN_UPLOAD_MB,
        le=ImageConstants.MAX_UPLOAD_MB,
    )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


class Settings(BaseModel):
    """Root settings object"""

    environment: str = "development"
    system: SystemConfig = Field(default_factory=SystemConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    output: OutputSettings = Field(default_factory=OutputSettings)
    image: ImageLimits = Field(default_factory=ImageLimits)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Build settings from defaults and environment overrides."""
    defaults = Settings()

    return Settings(
        environment=os.getenv("COMPOSITOR_ENV", defaults.environment),
        system=SystemConfig(
            log_level=os.getenv("LOG_LEVEL", defaults.system.log_level),
            debug=_env_bool("DEBUG", defaults.system.debug),
        ),
        api=APIConfig(
            host=os.getenv("API_HOST", defaults.api.host),
            port=int(os.getenv("API_PORT", defaults.api.port)),
            cors_enabled=_env_bool("CORS_ENABLED", defaults.api.cors_enabled),
        ),
        output=OutputSettings(
            format=os.getenv("OUTPUT_FORMAT", defaults.output.format.value),
            compression_level=os.getenv(
                "OUTPUT_COMPRESSION", defaults.output.compression_level.value
            ),
        ),
        image=ImageLimits(
            max_upload_mb=int(os.getenv("MAX_UPLOAD_MB", defaults.image.max_upload_mb)),
        ),
    )


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings (cached)."""
    return load_settings()
