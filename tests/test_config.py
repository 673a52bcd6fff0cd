import os
from datetime import timedelta

import pytest

from shortlink.config import get_env, get_env_as_int, load_config

ENV_KEYS = [
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DATABASE_URL",
    "DB_MAX_OPEN_CONNS",
    "DB_MAX_IDLE_CONNS",
    "DB_CONN_MAX_LIFETIME",
    "SERVER_PORT",
    "SERVER_READ_TIMEOUT",
    "SERVER_WRITE_TIMEOUT",
    "SERVER_IDLE_TIMEOUT",
    "ENV",
    "SHORTLINK_SAMPLE",
]


@pytest.fixture
def clean_env(monkeypatch):
    saved = dict(os.environ)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    os.environ.clear()
    os.environ.update(saved)


def test_defaults(clean_env):
    config = load_config(None)
    assert config.database.host == "127.0.0.1"
    assert config.database.port == 3306
    assert config.database.user == "user"
    assert config.database.password == ""
    assert config.database.name == "tests"
    assert config.database_url == "mysql://root:@tcp(127.0.0.1:3306)/tests?parseTime=true"
    assert config.database.max_open_conns == 10
    assert config.database.max_idle_conns == 5
    assert config.database.conn_max_lifetime == timedelta(seconds=3600)
    assert config.server.port == "8080"
    assert config.server.read_timeout == timedelta(seconds=5)
    assert config.server.write_timeout == timedelta(seconds=10)
    assert config.server.idle_timeout == timedelta(seconds=30)
    assert config.environment == "development"
    assert config.is_development
    assert not config.is_production


def test_default_dsn(clean_env):
    assert load_config(None).dsn == "user:@tcp(127.0.0.1:3306)/tests?parseTime=true"


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.example.com")
    monkeypatch.setenv("DB_PORT", "3307")
    monkeypatch.setenv("DB_USER", "user")
    monkeypatch.setenv("DB_PASSWORD", "password")
    monkeypatch.setenv("DB_NAME", "shop")
    monkeypatch.setenv("SERVER_READ_TIMEOUT", "7")
    monkeypatch.setenv("ENV", "production")
    config = load_config(None)
    assert config.connect_kwargs == {
        "host": "db.example.com",
        "port": 3307,
        "user": "user",
        "password": "password",
        "database": "shop",
    }
    assert config.server.read_timeout == timedelta(seconds=7)
    assert config.is_production
    assert not config.is_development
    assert config.dsn.startswith("user:password@tcp(db.example.com:3307)/shop")


def test_get_env_uses_fallback_for_empty(clean_env, monkeypatch):
    monkeypatch.setenv("SHORTLINK_SAMPLE", "")
    assert get_env("SHORTLINK_SAMPLE", "fallback") == "fallback"
    monkeypatch.setenv("SHORTLINK_SAMPLE", "value")
    assert get_env("SHORTLINK_SAMPLE", "fallback") == "value"


@pytest.mark.parametrize(("raw", "expected"), [("42", 42), ("+5", 5), ("-3", -3)])
def test_get_env_as_int_parses(clean_env, monkeypatch, raw, expected):
    monkeypatch.setenv("SHORTLINK_SAMPLE", raw)
    assert get_env_as_int("SHORTLINK_SAMPLE", 1) == expected


@pytest.mark.parametrize("raw", ["abc", " 5", "1_000", "3.5", "5s"])
def test_get_env_as_int_invalid_falls_back(clean_env, monkeypatch, raw):
    monkeypatch.setenv("SHORTLINK_SAMPLE", raw)
    assert get_env_as_int("SHORTLINK_SAMPLE", 17) == 17


def test_get_env_as_int_unset_falls_back(clean_env):
    assert get_env_as_int("SHORTLINK_SAMPLE", 9) == 9


def test_invalid_port_falls_back_in_config(clean_env, monkeypatch):
    monkeypatch.setenv("DB_PORT", "not-a-port")
    assert load_config(None).database.port == 3306


def test_env_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DB_NAME=fromfile\nSERVER_PORT=9090\n")
    config = load_config(env_file)
    assert config.database.name == "fromfile"
    assert config.server.port == "9090"


def test_env_file_does_not_override_environment(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DB_NAME=fromfile\n")
    monkeypatch.setenv("DB_NAME", "fromenv")
    assert load_config(env_file).database.name == "fromenv"


def test_missing_env_file_uses_defaults(clean_env, tmp_path):
    config = load_config(tmp_path / "missing.env")
    assert config.server.port == "8080"