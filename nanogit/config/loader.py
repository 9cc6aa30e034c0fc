"""Configuration loading utilities."""

import json
import re
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from nanogit.config.schema import Config
from nanogit.errors import InvalidArgument


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".nanogit" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file, falling back to defaults.
    
    Args:
        config_path: Optional path to config file. Uses default if not provided.
    
    Returns:
        Loaded configuration object.
    
    Raises:
        InvalidArgument: If the file exists but is not a valid configuration.
    """
    path = config_path or get_config_path()
    
    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return Config()
    
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidArgument(f"Invalid JSON in {path}: {e}") from e
    
    if not isinstance(data, dict):
        raise InvalidArgument(f"Config root in {path} must be an object")
    
    try:
        return Config(**convert_keys(data))
    except ValidationError as e:
        raise InvalidArgument(f"Invalid config in {path}: {e}") from e


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case, recursively."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
