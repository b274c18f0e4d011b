"""
load CLI defaults from an explicitly given config.yaml
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError


# Keys accepted under `defaults:`, mapped to CLI option destinations
OPTION_KEYS = (
    'provider',
    'branch',
    'output',
    'keep_original_path',
    'github_basic_username',
    'github_basic_password',
    'github_oauth_token',
    'gitlab_private_token',
)


class Config:
    """Configuration read from a YAML file the user points at.

    Example file::

        defaults:
          provider: gitlab
          branch: main
          gitlab_private_token: xxxx
        logging:
          level: INFO
          json: false
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration.

        Args:
            config_path: Path to a YAML file. If None, the configuration is empty;
                         no file is looked up implicitly.
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if self.config_path is None:
            return {}

        try:
            with open(self.config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration file: {e}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {self.config_path}")

        unknown = set(config.get('defaults') or {}) - set(OPTION_KEYS)
        if unknown:
            raise ConfigError(f"Unknown keys under defaults: {', '.join(sorted(unknown))}")

        return config

    def get(self, *keys, default=None):
        """Get configuration value using dot notation.

        Args:
            *keys: Configuration keys (e.g., 'logging', 'level')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current = self._config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    @property
    def defaults(self) -> Dict[str, Any]:
        """Get CLI option defaults."""
        return self.get('defaults', default=None) or {}

    @property
    def logging(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get('logging', default=None) or {}
