"""
sysx Configuration Management

Provides centralized configuration with validation and environment support.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    file_path: Optional[str] = Field(default=None, description="Log file path")
    max_file_size: int = Field(
        default=10_000_000, description="Max log file size in bytes"
    )
    backup_count: int = Field(default=5, description="Number of backup log files")
    colored: bool = Field(default=True, description="Colorize console output")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = {
            "TRACE",
            "DEBUG",
            "INFO",
            "SUCCESS",
            "WARNING",
            "ERROR",
            "BUG",
            "CRITICAL",
            "FATAL",
        }
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


class CommandConfig(BaseModel):
    """Command execution configuration."""

    default_timeout: Optional[float] = Field(
        default=None, description="Default command timeout in seconds"
    )
    echo_output: bool = Field(
        default=True, description="Print command output from run()"
    )

    @field_validator("default_timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError(f"Invalid timeout: {v}. Must be positive")
        return v


class SysxConfig(BaseSettings):
    """Main sysx configuration."""

    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    command: CommandConfig = Field(default_factory=CommandConfig)

    model_config = SettingsConfigDict(
        env_prefix="SYSX_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )


# Global configuration instance
_config: Optional[SysxConfig] = None


def get_config() -> SysxConfig:
    """
    Get the global configuration instance.

    Returns:
        The global SysxConfig instance
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def load_config(config_file: Optional[Path] = None) -> SysxConfig:
    """
    Load configuration from an env file and environment variables.

    Args:
        config_file: Optional path to a dotenv-style configuration file

    Returns:
        Loaded configuration instance
    """
    if config_file and config_file.exists():
        return SysxConfig(_env_file=str(config_file))
    return SysxConfig()


def reload_config(config_file: Optional[Path] = None) -> SysxConfig:
    """
    Reload the global configuration.

    Args:
        config_file: Optional path to configuration file

    Returns:
        Reloaded configuration instance
    """
    global _config
    _config = load_config(config_file)
    return _config


def update_config(**kwargs: Any) -> None:
    """
    Update configuration values at runtime.

    Args:
        **kwargs: Configuration values to update

    Raises:
        ValueError: If a key is not a known configuration field
    """
    global _config
    if _config is None:
        _config = load_config()

    for key, value in kwargs.items():
        if hasattr(_config, key):
            setattr(_config, key, value)
        else:
            raise ValueError(f"Unknown configuration key: {key}")

