"""
Unified Configuration System for LogHaven

Single source of truth for framework configuration using pydantic-settings.

ARCHITECTURAL PRINCIPLES:
- Only this module accesses environment variables directly
- All other modules receive configuration via get_settings()
- Type-safe validation with automatic conversion
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


# =============================================================================
# ENUMS
# =============================================================================

class InternalLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# =============================================================================
# NESTED CONFIGURATION SECTIONS
# =============================================================================

class InternalLoggingSettings(BaseSettings):
    """Diagnostics emitted by LogHaven about itself"""
    internal_level: InternalLogLevel = Field(default=InternalLogLevel.WARNING)
    internal_json: bool = Field(default=False)
    quiet_mode: bool = Field(default=False)

    model_config = {"env_prefix": "LOGHAVEN_", "extra": "ignore"}


class RepositorySettings(BaseSettings):
    """Default repository configuration"""
    default_repository_name: str = Field(default="default")
    default_threshold: str = Field(default="ALL")

    model_config = {"env_prefix": "LOGHAVEN_", "extra": "ignore"}

    @field_validator("default_threshold")
    @classmethod
    def validate_threshold(cls, v: str) -> str:
        from loghaven.core.level import Level

        # Raises ValueError for unknown names, reported by pydantic
        return Level.from_name(v).name


class DateFormatSettings(BaseSettings):
    """Timestamp rendering configuration"""
    date_format: str = Field(default="ISO8601")

    model_config = {"env_prefix": "LOGHAVEN_", "extra": "ignore"}

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("date_format must not be empty")
        return v


# =============================================================================
# MAIN SETTINGS CLASS
# =============================================================================

class LogHavenSettings(BaseSettings):
    """Aggregated LogHaven configuration"""
    internal_logging: InternalLoggingSettings = Field(default_factory=InternalLoggingSettings)
    repository: RepositorySettings = Field(default_factory=RepositorySettings)
    date_format: DateFormatSettings = Field(default_factory=DateFormatSettings)

    model_config = {
        "env_prefix": "LOGHAVEN_SETTINGS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "validate_assignment": True,
        "extra": "ignore"
    }


# =============================================================================
# SINGLETON MANAGEMENT
# =============================================================================

_settings_instance: Optional[LogHavenSettings] = None


def get_settings() -> LogHavenSettings:
    """
    Get global settings instance (singleton pattern).

    Raises:
        ConfigurationException: If settings validation fails
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            from dotenv import load_dotenv

            load_dotenv(override=False)
            _settings_instance = LogHavenSettings()
        except Exception as e:
            from loghaven.exceptions import ConfigurationException
            raise ConfigurationException(
                f"Settings initialization failed: {e}",
                details={"original_error": str(e), "error_type": type(e).__name__}
            ) from e
    return _settings_instance


def reset_settings() -> None:
    """
    Reset settings instance (primarily for testing).

    Forces recreation of settings on next get_settings() call.
    """
    global _settings_instance
    _settings_instance = None
