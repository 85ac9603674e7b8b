"""
Configuration loader for unplugged.

Loads settings from config.json with sensible defaults.
"""

import copy
import json
import os
from typing import Any, Dict


# Default configuration
DEFAULT_CONFIG = {
    "providers": {
        "weather": {
            "enabled": True,
            "location": {
                "latitude": 51.5074,
                "longitude": -0.1278,
                "name": "London, UK"
            },
            "api_key_env": "OPENWEATHER_API_KEY",
            "uv_index": 5,
            "timeout": 10,
            "cache_duration": 600
        }
    },
    "canvas": {
        "width": 800,
        "height": 400,
        "mode": "vibrant",
        "output_dir": "output"
    }
}


class Config:
    """
    Configuration manager for unplugged.

    Loads config.json from the working directory, falling back to defaults.
    """

    def __init__(self, config_path: str = "config.json"):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: config.json in current directory)
        """
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from file or use defaults.

        Returns:
            Configuration dictionary
        """
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    return json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                print(f"Warning: Could not load {self.config_path}: {e}")
                print("Using default configuration")
                return copy.deepcopy(DEFAULT_CONFIG)
        else:
            # Config file doesn't exist, use defaults
            return copy.deepcopy(DEFAULT_CONFIG)

    def get(self, *keys: str, default: Any = None) -> Any:
        """
        Get nested config value.

        Args:
            *keys: Nested keys to traverse (e.g., "providers", "weather", "location")
            default: Default value if key not found

        Returns:
            Config value or default

        Example:
            config.get("providers", "weather", "location", "latitude")
            # Returns: 51.5074
        """
        value = self.config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def get_provider_config(self, provider_name: str) -> Dict[str, Any]:
        """
        Get configuration for a specific provider.

        Args:
            provider_name: Name of provider (e.g., "weather")

        Returns:
            Provider configuration dictionary (empty dict if not found)
        """
        return self.get("providers", provider_name, default={})

    def get_canvas_config(self) -> Dict[str, Any]:
        """
        Get artwork canvas configuration.

        Missing keys are filled from the defaults.

        Returns:
            Canvas configuration dictionary with width, height, mode, output_dir
        """
        canvas = dict(DEFAULT_CONFIG["canvas"])
        canvas.update(self.get("canvas", default={}))
        return canvas


# Global config instance
_config = None


def get_config() -> Config:
    """
    Get global configuration instance.

    Lazy-loads configuration on first access.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
