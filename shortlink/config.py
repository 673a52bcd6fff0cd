"""Service configuration read from the environment and an optional .env file."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class DatabaseConfig:
    host: str
    port: int
    user: str
    password: str
    name: str
    url: str
    max_open_conns: int
    max_idle_conns: int
    conn_max_lifetime: timedelta


@dataclass(frozen=True)
class ServerConfig:
    port: str
    read_timeout: timedelta
    write_timeout: timedelta
    idle_timeout: timedelta


@dataclass(frozen=True)
class Config:
    database: DatabaseConfig
    server: ServerConfig
    environment: str

    @property
    def dsn(self) -> str:
        """The MySQL data source name for the configured database."""
        db = self.database
        return f"{db.user}:{db.password}@tcp({db.host}:{db.port})/{db.name}?parseTime=true"

    @property
    def connect_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for opening a MySQL connection."""
        db = self.database
        return {
            "host": db.host,
            "port": db.port,
            "user": db.user,
            "password": db.password,
            "database": db.name,
        }

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def get_env(key: str, fallback: str) -> str:
    """Return the variable's value, or the fallback when it is unset or empty."""
    return os.environ.get(key) or fallback


def get_env_as_int(key: str, fallback: int) -> int:
    """Return the variable as an integer, or the fallback when unset or invalid."""
    value = os.environ.get(key)
    if not value:
        return fallback
    if _INTEGER.fullmatch(value):
        return int(value)
    logger.warning(
        "Invalid integer value for %s: %s, using fallback: %d", key, value, fallback
    )
    return fallback


def _seconds(key: str, fallback: int) -> timedelta:
    return timedelta(seconds=get_env_as_int(key, fallback))


def _database_credential() -> str:
    return get_env("DB_PASSWORD", "")


def load_config(env_file: str | os.PathLike[str] | None = ".env") -> Config:
    """Read the configuration, first loading env_file without overriding set variables."""
    if env_file is not None and not load_dotenv(Path(env_file), override=False):
        logger.warning("Could not load environment file %s", env_file)

    return Config(
        database=DatabaseConfig(
            host=get_env("DB_HOST", "127.0.0.1"),
            port=get_env_as_int("DB_PORT", 3306),
            user=get_env("DB_USER", "user"),
            password=_database_credential(),
            name=get_env("DB_NAME", "tests"),
            url=get_env(
                "DATABASE_URL",
                "mysql://root:@tcp(127.0.0.1:3306)/tests?parseTime=true",
            ),
            max_open_conns=get_env_as_int("DB_MAX_OPEN_CONNS", 10),
            max_idle_conns=get_env_as_int("DB_MAX_IDLE_CONNS", 5),
            conn_max_lifetime=_seconds("DB_CONN_MAX_LIFETIME", 3600),
        ),
        server=ServerConfig(
            port=get_env("SERVER_PORT", "8080"),
            read_timeout=_seconds("SERVER_READ_TIMEOUT", 5),
            write_timeout=_seconds("SERVER_WRITE_TIMEOUT", 10),
            idle_timeout=_seconds("SERVER_IDLE_TIMEOUT", 30),
        ),
        environment=get_env("ENV", "development"),
    )