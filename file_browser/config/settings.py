"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_browser.entities.RootContext import DEFAULT_ROOT
from file_browser.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.root_path: str = self._get_env("FILE_BROWSER_ROOT", DEFAULT_ROOT)
        self.base_dir: str = self._get_env("FILE_BROWSER_BASE_DIR", os.getcwd())
        self.static_dir: str = self._get_env("FILE_BROWSER_STATIC_DIR", "wwwroot")
        self.log_level: int = self._get_log_level("LOG_LEVEL", "INFO")
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_int_env("PORT", 8000)
        self.reload: bool = self._get_env("RELOAD", "0") in {"1", "true", "True"}

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if it is not a number."""
        value = self._get_env(key, str(default))
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {value!r}")

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level name from the environment."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level in {key}: {name!r}")
        return level


# Global settings instance
settings = Settings()
