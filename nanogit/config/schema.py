"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class AuthorConfig(BaseModel):
    """Identity used for commits made from the CLI."""
    name: str = "nanogit"
    email: str = "nanogit@localhost"


class LogConfig(BaseModel):
    """Defaults for the `log` command."""
    max_commits: int = 50
    oneline: bool = False

    @field_validator("max_commits")
    @classmethod
    def validate_max_commits(cls, v: int) -> int:
        """Validate max_commits is positive."""
        if v < 1:
            raise ValueError("max_commits must be at least 1")
        return v


class LoggingConfig(BaseModel):
    """Diagnostic logging configuration."""
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate level is one loguru knows."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class Config(BaseSettings):
    """Root configuration for nanogit."""
    author: AuthorConfig = Field(default_factory=AuthorConfig)
    log: LogConfig = Field(default_factory=LogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="NANOGIT_",
        env_nested_delimiter="__",
    )
