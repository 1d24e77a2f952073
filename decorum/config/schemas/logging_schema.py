"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

from decorum.config.defaults import LogDestination, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stdout", description="Where logs go: stdout, file or both")
    file_path: str = Field("logs/decorum.log", description="Log file path")
    max_size_mb: int = Field(10, gt=0, description="Maximum log file size before rotation")
    backup_count: int = Field(5, ge=0, description="Number of rotated log files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="Log record format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        destination = v.lower()
        if destination not in {d.value for d in LogDestination}:
            raise ValueError(f"Invalid log destination: {v}")
        return destination
