"""Configuration models."""

from typing import Optional
from pydantic import BaseModel, Field, validator


class RuntimeConfig(BaseModel):
    """Container runtime connection configuration."""
    docker_host: Optional[str] = Field(
        default=None, description="Docker daemon URL, defaults to DOCKER_HOST or the local socket"
    )
    removal_timeout: float = Field(default=30.0, ge=0)
    poll_interval: float = Field(default=0.5, gt=0)


class BerthConfig(BaseModel):
    """Main configuration model."""
    name: str = Field(..., min_length=1, description="Container and image name")
    version: Optional[str] = Field(default=None, min_length=1, description="Image tag to run")
    port: Optional[int] = Field(default=None, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    @validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    class Config:
        """Pydantic config."""
        extra = "ignore"
