"""
Configuration management for Threadexport.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage fetch, export and logging settings
without changing code.
"""

import yaml
from pathlib import Path
from typing import Any, Dict
import logging


DATE_FORMATS = ("iso8601", "rfc1123", "utc")


class ConfigManager:
    """
    Manages configuration loading and access for Threadexport.
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

        except Exception as e:
            logging.error(f"Failed to load configuration: {e}")
            # Fall back to default configuration
            self._config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "fetch": {
                "user_agent": "threadexport/0.1 (comment table exporter)",
                "timeout": 30.0
            },
            "export": {
                "date_format": "iso8601",
                "compact_mode": False,
                "remove_newlines": False,
                "csv_filename": "reddit_comments.csv",
                "html_filename": "reddit_comments.html",
                "tree_filename": "reddit_comments_tree.json"
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "paths": {
                "log_file": "threadexport.log"
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "export.date_format")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("export.date_format")  # Returns "iso8601"
            config.get("fetch.timeout")  # Returns 30.0
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
    def user_agent(self) -> str:
        """Get the User-Agent header sent to Reddit."""
        return self.get("fetch.user_agent", "threadexport/0.1 (comment table exporter)")

    @property
    def fetch_timeout(self) -> float:
        """Get the HTTP timeout in seconds."""
        return self.get("fetch.timeout", 30.0)

    @property
    def date_format(self) -> str:
        """Get the default date format selector."""
        value = self.get("export.date_format", "iso8601")
        if value not in DATE_FORMATS:
            logging.warning(f"Unknown date format '{value}' in configuration, using iso8601")
            return "iso8601"
        return value

    @property
    def compact_mode(self) -> bool:
        """Get the default compact-mode flag."""
        return bool(self.get("export.compact_mode", False))

    @property
    def remove_newlines(self) -> bool:
        """Get the default newline-removal flag."""
        return bool(self.get("export.remove_newlines", False))

    @property
    def csv_filename(self) -> str:
        """Get CSV output file name."""
        return self.get("export.csv_filename", "reddit_comments.csv")

    @property
    def html_filename(self) -> str:
        """Get HTML output file name."""
        return self.get("export.html_filename", "reddit_comments.html")

    @property
    def tree_filename(self) -> str:
        """Get hierarchy JSON output file name."""
        return self.get("export.tree_filename", "reddit_comments_tree.json")

    @property
    def log_filename(self) -> str:
        """Get log file name."""
        return self.get("paths.log_file", "threadexport.log")


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
