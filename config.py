"""Настройки приложения из переменных окружения (+ опциональный .env)."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv(override=False)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
PUBLIC_DIR = BASE_DIR / "public"

DEV_SECRET_KEY = "dev-secret-key-change-me"


def _env(name: str, default: str = "") -> str:
    value = os.getenv(name)
    return default if value is None or value.strip() == "" else value.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    app_name: str
    env: str
    secret_key: str
    database_url: str
    log_level: str
    log_dir: Optional[str]
    default_locale: str
    error_reporter_url: Optional[str]
    error_reporter_timeout: float
    host: str
    port: int

    @property
    def is_production(self) -> bool:
        return self.env == "production"


def load_settings() -> Settings:
    """Собрать Settings из окружения"""
    env = _env("ENV", "development")
    secret_key = _env("SECRET_KEY")
    if not secret_key:
        if env == "production":
            raise RuntimeError("SECRET_KEY is not set")
        secret_key = DEV_SECRET_KEY

    return Settings(
        app_name=_env("APP_NAME", "Task Manager"),
        env=env,
        secret_key=secret_key,
        database_url=_env("DATABASE_URL", "sqlite:///./task_manager.sqlite3"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        log_dir=_env("LOG_DIR") or None,
        default_locale=_env("DEFAULT_LOCALE", "en"),
        error_reporter_url=_env("ERROR_REPORTER_URL") or None,
        error_reporter_timeout=_env_float("ERROR_REPORTER_TIMEOUT", 5.0),
        host=_env("HOST", "0.0.0.0"),
        port=_env_int("PORT", 8000),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
