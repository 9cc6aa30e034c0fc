"""Configuration module for nanogit."""

from nanogit.config.loader import get_config_path, load_config
from nanogit.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
