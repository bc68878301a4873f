"""Configuration management for the splitjoin CLI."""

import json
import os
from pathlib import Path
from typing import Optional

from common.constants import DEFAULT_SPLIT_SIZE_MB, MAX_SPLIT_SIZE_MB
from common.logging_config import DEFAULT_LOG_LEVEL, get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_config_path() -> Path:
    """Config file location, overridable with SPLITJOIN_CONFIG."""
    override = os.environ.get("SPLITJOIN_CONFIG")
    if override:
        return Path(override)
    return Path.home() / '.splitjoin' / 'config.json'


class Config:
    """Manages CLI configuration stored in a JSON file."""

    DEFAULT_CONFIG = {
        "default_chunk_size_mb": DEFAULT_SPLIT_SIZE_MB,
        "log_level": DEFAULT_LOG_LEVEL,
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        The file is only read; a missing file means defaults, so that
        commands such as verify never create anything on disk.

        Args:
            config_path: Path to config JSON file (typically ~/.splitjoin/config.json)
        """
        self.config_path = config_path or default_config_path()
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, then apply environment overrides.

        Returns:
            Configuration dictionary
        """
        config = self.DEFAULT_CONFIG.copy()

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top-level JSON value must be an object")
                config.update(data)
            except (json.JSONDecodeError, ValueError, OSError) as e:
                logger.warning(f"Ignoring unreadable config file '{self.config_path}': {e}")

        env_size = os.environ.get("SPLITJOIN_CHUNK_SIZE_MB")
        if env_size:
            config["default_chunk_size_mb"] = env_size
        env_level = os.environ.get("LOG_LEVEL")
        if env_level:
            config["log_level"] = env_level

        return config

    def get_default_chunk_size_mb(self) -> int:
        """
        Get the split size used when a split command gives none.

        Returns:
            Chunk size in MB; invalid values fall back to the built-in default
        """
        value = self.data.get("default_chunk_size_mb", DEFAULT_SPLIT_SIZE_MB)
        try:
            size = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid default_chunk_size_mb {value!r}, using {DEFAULT_SPLIT_SIZE_MB}")
            return DEFAULT_SPLIT_SIZE_MB
        if not 0 < size <= MAX_SPLIT_SIZE_MB:
            logger.warning(f"default_chunk_size_mb {size} out of range, using {DEFAULT_SPLIT_SIZE_MB}")
            return DEFAULT_SPLIT_SIZE_MB
        return size

    def get_log_level(self) -> str:
        """
        Get the configured log level name.

        Returns:
            Upper-case level name; unknown names fall back to WARNING
        """
        level = str(self.data.get("log_level", DEFAULT_LOG_LEVEL)).upper()
        if level not in VALID_LOG_LEVELS:
            return DEFAULT_LOG_LEVEL
        return level
