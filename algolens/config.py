"""
Configuration for algolens.

Settings live in a nested dictionary merged over :attr:`Config.DEFAULT_CONFIG`
and are read with dot-separated keys, e.g. ``config.get("complexity.high_lines")``.
Files are YAML (``.yml``/``.yaml``) or JSON.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .engine.errors import ConfigError

CONFIG_FILENAMES = [".algolens.yml", ".algolens.yaml", "algolens.yml", "algolens.yaml"]
CONFIG_ENV_VAR = "ALGOLENS_CONFIG"
OUTPUT_FORMATS = ("text", "json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Configuration manager for algolens."""

    DEFAULT_CONFIG = {
        "detection": {
            # Category-keyword rule; high recall, low precision
            "keyword_matching": True,
        },
        "complexity": {
            "medium_lines": 50,
            "high_lines": 100,
        },
        "catalog": {
            # Replacement catalog file; None uses the built-in one
            "path": None,
        },
        "logging": {
            "level": "WARNING",
            "file": False,
            "log_dir": None,
        },
        "output": {
            "format": "text",
        },
    }

    def __init__(self, config_dict: Optional[Dict] = None):
        """Initialize with optional config dictionary."""
        self.config = self._merge_configs(self.DEFAULT_CONFIG, config_dict or {})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        """Load configuration from a file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path, "r", encoding="utf-8") as f:
            try:
                if path.suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f) or {}
                elif path.suffix == ".json":
                    data = json.load(f)
                else:
                    raise ConfigError(f"Unsupported config format: {path.suffix}", key="path", value=str(path))
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ConfigError(f"Cannot parse config {path}: {e}", key="path", value=str(path)) from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping", key="path", value=str(path))

        config = cls(data)
        # Relative catalog paths are resolved against the config file
        catalog_path = config.get("catalog.path")
        if catalog_path and not Path(catalog_path).is_absolute():
            config.set("catalog.path", str(path.parent / catalog_path))
        return config

    @classmethod
    def find_and_load(cls, start_path: Union[str, Path] = ".") -> "Config":
        """Find and load configuration from standard locations.

        ``$ALGOLENS_CONFIG`` wins when it names an existing file; otherwise the
        directory tree is searched upward from ``start_path``.
        """
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path and Path(env_path).exists():
            return cls.from_file(env_path)

        current = Path(start_path).resolve()

        while current != current.parent:
            for name in CONFIG_FILENAMES:
                config_path = current / name
                if config_path.exists():
                    return cls.from_file(config_path)
            current = current.parent

        return cls()

    def get(self, key: str, default=None):
        """Get configuration value by dot-separated key."""
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value):
        """Set configuration value by dot-separated key."""
        keys = key.split(".")
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def validate(self) -> "Config":
        """Raise :class:`ConfigError` on invalid values; returns self."""
        medium = self.get("complexity.medium_lines")
        high = self.get("complexity.high_lines")
        for key, value in (("complexity.medium_lines", medium), ("complexity.high_lines", high)):
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"{key} must be a positive integer, got {value!r}", key=key, value=value)
        if medium > high:
            raise ConfigError(
                f"complexity.medium_lines ({medium}) must not exceed complexity.high_lines ({high})",
                key="complexity.medium_lines",
                value=medium,
            )

        keyword_matching = self.get("detection.keyword_matching")
        if not isinstance(keyword_matching, bool):
            raise ConfigError(
                f"detection.keyword_matching must be a boolean, got {keyword_matching!r}",
                key="detection.keyword_matching",
                value=keyword_matching,
            )

        output_format = self.get("output.format")
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}",
                key="output.format",
                value=output_format,
            )

        level = str(self.get("logging.level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown logging.level {level!r}", key="logging.level", value=level)

        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return json.loads(json.dumps(self.config))

    def _merge_configs(self, base: Dict, override: Dict) -> Dict:
        """Recursively merge configuration dictionaries."""
        result = {k: (dict(v) if isinstance(v, dict) else v) for k, v in base.items()}

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result
