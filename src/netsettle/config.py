"""Application configuration objects and helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "netsettle"
    LOG_FILENAME = "netsettle.log"
    LOG_MAX_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("NETSETTLE_DEV_MODE", default=True)
        self.TRACE = _env_bool("NETSETTLE_TRACE", default=False)
        self.LOG_LEVEL = self._resolve_log_level(os.getenv("NETSETTLE_LOG_LEVEL", "INFO"))

    def _resolve_data_dir(self) -> Path:
        """Return the directory that holds the ``logs/`` folder."""

        data_root = os.getenv("NETSETTLE_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _resolve_log_level(name: str) -> int:
        level = logging.getLevelName(name.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"NETSETTLE_LOG_LEVEL is not a logging level: {name!r}")
        return level


class DevConfig(BaseConfig):
    """Development configuration with queue tracing on."""

    DEBUG = True
    TESTING = False

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True
        self.TRACE = _env_bool("NETSETTLE_TRACE", default=True)


class TestConfig(BaseConfig):
    """Test configuration writing logs under an explicit directory."""

    __test__ = False

    DEBUG = False
    TESTING = True

    def __init__(self, data_dir: Path | str | None = None) -> None:
        super().__init__()
        if data_dir is not None:
            self.DATA_DIR = Path(data_dir)
            self.DATA_DIR.mkdir(parents=True, exist_ok=True)
