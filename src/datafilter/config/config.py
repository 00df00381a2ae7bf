"""Configuration management for datafilter."""

from __future__ import annotations

import codecs
import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from datafilter.config.paths import default_config_path, default_log_dir
from datafilter.platform.logging import logger
from datafilter.shared.errors import DataFilterError

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigurationError(DataFilterError):
    """Raised when the configuration file cannot be read or parsed."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; file logging is disabled when unset
    log_file: Path | None = _path_field()

    # Text encoding for input and output files
    encoding: str = DEFAULT_ENCODING

    # Console log level name
    log_level: str = DEFAULT_LOG_LEVEL

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata.

        Relative paths are placed under the repository ``logs`` directory.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                value = Path(value).expanduser() if value.strip() else None
            if isinstance(value, Path) and not value.is_absolute():
                value = default_log_dir() / value
            setattr(self, f.name, value)

    def resolved_encoding(self) -> str:
        """Return the configured encoding, or the default when Python does not know it."""
        try:
            return codecs.lookup(self.encoding).name
        except LookupError:
            logger.warning(
                "Unknown encoding %r in configuration; using %s", self.encoding, DEFAULT_ENCODING
            )
            return DEFAULT_ENCODING

    def console_level(self) -> int:
        """Return the numeric console log level, falling back to ``INFO``."""
        level = logging.getLevelName(str(self.log_level).upper())
        if isinstance(level, int):
            return level
        logger.warning("Unknown log level %r in configuration; using %s", self.log_level, DEFAULT_LOG_LEVEL)
        return logging.INFO

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit configuration path. Defaults to
                ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when the file is absent.

        Raises:
            ConfigurationError: If the file exists but cannot be read or parsed.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        if not target.exists():
            instance = cls()
            cls._instance = instance
            cls._loaded_from = target
            return instance

        try:
            with open(target, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration from {target}: {e}") from e

        known = {f.name for f in fields(cls)}
        for key in sorted(set(config_dict) - known):
            logger.warning("Ignoring unknown configuration key %r in %s", key, target)
            del config_dict[key]

        instance = cls(**config_dict)
        logger.debug("Configuration loaded from %s", target)
        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` reads the file again."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigurationError", "DEFAULT_ENCODING", "DEFAULT_LOG_LEVEL"]
