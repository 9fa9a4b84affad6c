"""
Configuration management for Liturgica.

This module handles loading and accessing configuration values from config.yaml.
Only the command line entry point reads configuration; the tree builder,
the validator and the stores take everything they need as arguments.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
import logging


class ConfigManager:
    """
    Manages configuration loading and access for Liturgica.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}

            logging.info(f"Configuration loaded from {self.config_path}")

        except (OSError, yaml.YAMLError) as e:
            logging.warning(f"Failed to load configuration, using defaults: {e}")
            self._config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "paths": {
                "tree_config": None,
                "block_definitions": None,
                "prayers_dir": "prayers",
                "drafts_dir": "drafts",
                "log_file": "liturgica.log"
            },
            "tree": {
                "include_editor_only": True,
                "export_indent": 2
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "paths.prayers_dir")
            default: Default value if key is not found

        Returns:
            The configuration value
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def tree_config_path(self) -> Optional[str]:
        """Tree configuration file, None for the bundled one."""
        return self.get("paths.tree_config")

    @property
    def block_definitions_path(self) -> Optional[str]:
        """Block definitions file, None for the bundled one."""
        return self.get("paths.block_definitions")

    @property
    def prayers_directory(self) -> str:
        return self.get("paths.prayers_dir", "prayers")

    @property
    def drafts_directory(self) -> str:
        return self.get("paths.drafts_dir", "drafts")

    @property
    def log_filename(self) -> str:
        return self.get("paths.log_file", "liturgica.log")

    @property
    def include_editor_only(self) -> bool:
        """Whether navigation output includes editor-only branches."""
        return self.get("tree.include_editor_only", True)

    @property
    def export_indent(self) -> int:
        return self.get("tree.export_indent", 2)


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
