"""Library configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Environment variable pointing at a JSON config file
CONFIG_ENV_VAR = "SPROCKETS_CONFIG"

DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(name)s %(levelname)s: %(message)s"


@dataclass
class ElementsConfig:
    """Settings for the sprockets package logger."""
    log_level: str = DEFAULT_LOG_LEVEL

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "ElementsConfig":
        if not isinstance(d, dict):
            return cls()

        known = {f.name for f in cls.__dataclass_fields__.values()}
        config = cls(**{k: v for k, v in d.items() if k in known})

        if not isinstance(logging.getLevelName(str(config.log_level).upper()), int):
            logger.warning(f"Ignoring invalid log_level: {config.log_level!r}")
            config.log_level = DEFAULT_LOG_LEVEL
        else:
            config.log_level = str(config.log_level).upper()

        return config

    def save(self, path: Path):
        temp = path.with_suffix(".tmp")
        temp.write_text(json.dumps(self.to_dict(), indent=2))
        temp.rename(path)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ElementsConfig":
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if not env_path:
                return cls()
            path = Path(env_path)
        try:
            if path.exists():
                return cls.from_dict(json.loads(path.read_text()))
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Failed to read config {path}: {e}")
        return cls()


# Global instance for singleton access
_config_instance: Optional[ElementsConfig] = None
_config_lock = threading.Lock()


def get_config() -> ElementsConfig:
    """Get or load the global ElementsConfig instance."""
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = ElementsConfig.load()
    return _config_instance


def set_config(config: ElementsConfig) -> None:
    global _config_instance
    with _config_lock:
        _config_instance = config


def reset_config() -> None:
    """Drop the global config so the next get_config() reloads it."""
    global _config_instance
    with _config_lock:
        _config_instance = None


def configure_logging(config: Optional[ElementsConfig] = None) -> logging.Logger:
    """
    Apply the configured level to the package logger.

    Attaches a stderr handler only if the package logger has none yet.
    """
    config = config or get_config()
    package_logger = logging.getLogger("sprockets")
    package_logger.setLevel(config.log_level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
