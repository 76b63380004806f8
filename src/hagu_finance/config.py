"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from .models.currency import CURRENCIES, DEFAULT_CURRENCY

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Hagu Finance"
    LOG_FILENAME = "hagu_finance.log"
    DEFAULT_LOCALE = "pt-BR"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("HAGU_DEV_MODE", default=True)
        self.CURRENCY = self._resolve_currency()
        self.LOCALE = os.getenv("HAGU_LOCALE", self.DEFAULT_LOCALE).strip() or self.DEFAULT_LOCALE

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and exports are written."""

        data_root = os.getenv("HAGU_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _resolve_currency(self) -> str:
        """Return the configured currency code, falling back to the default."""

        code = os.getenv("HAGU_CURRENCY", DEFAULT_CURRENCY).strip().upper()
        if code not in CURRENCIES:
            return DEFAULT_CURRENCY
        return code


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True
    TESTING = False
