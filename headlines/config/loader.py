"""Configuration loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..utils.logging import get_logger
from .models import ConfigModel

logger = get_logger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "headlines"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_DIR / "config.yaml"
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @classmethod
    def from_model(cls, model: ConfigModel) -> "Config":
        """Wrap an already built model, bypassing the file."""
        config = cls()
        config._config = model
        return config

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                logger.debug("No config at %s, using defaults", self.config_path)
                self._config = ConfigModel()
        return self._config

    def get_api_key(self) -> Optional[str]:
        """Resolve the API key.

        The environment variable wins over the literal value in the file and
        is looked up on every call, so a key exported after startup is seen
        by the next request.
        """
        gnews = self.config.gnews
        if gnews.api_key_env:
            api_key = os.environ.get(gnews.api_key_env)
            if api_key:
                return api_key
        return gnews.api_key


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")
    except TypeError as e:
        raise ValueError(f"Invalid configuration: expected a mapping ({e})")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
