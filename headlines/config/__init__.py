"""Configuration management for Headlines."""

from .loader import DEFAULT_CONFIG_DIR, Config, load_config, save_config
from .models import DEFAULT_PLACEHOLDER_IMAGE, ConfigModel, GNewsConfig, UIConfig

__all__ = [
    "Config",
    "ConfigModel",
    "GNewsConfig",
    "UIConfig",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_PLACEHOLDER_IMAGE",
    "load_config",
    "save_config",
]
