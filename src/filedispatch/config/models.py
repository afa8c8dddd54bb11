"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompressionSettings(BaseModel):
    """Parameters handed to the compressor."""

    first: str = Field(default="Hello", description="First compression parameter")
    second: str = Field(default="World", description="Second compression parameter")


class BatchSettings(BaseModel):
    """How a run reacts to a failing file."""

    fail_fast: bool = Field(
        default=True, description="Stop at the first failing file instead of trying the rest"
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class DispatchConfig(BaseModel):
    """Main configuration for filedispatch."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    compression: CompressionSettings = Field(
        default_factory=CompressionSettings, description="Compressor parameters"
    )
    batch: BatchSettings = Field(default_factory=BatchSettings, description="Batch policy")
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
