"""
Configuration models.

Provides Pydantic models for chksum configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import ChksumBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(ChksumBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ChecksumConfig(ConfigBaseModel):
    """Checksum defaults used by the CLI."""

    algorithm: str = "sha256"
    digest_length: int = Field(default=8, ge=0)

    @field_validator("algorithm", mode="before")
    @classmethod
    def validate_algorithm(cls, v: Any) -> str:
        """Reject algorithm names the registry cannot resolve."""
        from ...hashing.registry import HashAlgorithmRegistry

        if v is None:
            return "sha256"
        name = str(v).strip().lower()
        registry = HashAlgorithmRegistry()
        if not registry.is_supported(name):
            raise ValueError(f"Unsupported hash algorithm: {name}")
        return registry.canonical_name(name)


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False


class ChksumConfig(ConfigBaseModel):
    """Complete chksum configuration."""

    checksum: ChecksumConfig = Field(default_factory=ChecksumConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'checksum.algorithm')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        obj: Any = self
        for part in key.split("."):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            elif isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a nested dict."""
        return self.model_dump()
