"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    loaded = []
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: loaded.append(1))
    monkeypatch.setenv("WEALTH_DB_URL", "postgresql://wealth")

    assert db_module._get_env_var("WEALTH_DB_URL") == "postgresql://wealth"
    assert loaded == [1]


def test_get_env_var_rejects_empty_values(monkeypatch):
    """Missing or empty variables raise a RuntimeError naming them."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("WEALTH_DB_URL", "")

    with pytest.raises(RuntimeError, match="WEALTH_DB_URL"):
        db_module._get_env_var("WEALTH_DB_URL")


def test_create_engine_uses_small_checked_pool(monkeypatch):
    """_create_engine configures a pre-pinged QueuePool."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured.update(kwargs, db_url=db_url)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    assert db_module._create_engine("sqlite:///wealth.db") == "engine"
    assert captured["db_url"] == "sqlite:///wealth.db"
    assert captured["poolclass"] is db_module.QueuePool
    assert (captured["pool_size"], captured["max_overflow"]) == (5, 5)
    assert captured["pool_pre_ping"] is True


def test_wealth_engine_is_created_once(monkeypatch):
    """get_wealth_engine memoizes the engine for the process."""
    monkeypatch.setattr(db_module, "_wealth_engine", None)
    created = []
    monkeypatch.setattr(
        db_module,
        "_create_engine",
        lambda url: created.append(url) or f"engine:{url}",
    )
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("WEALTH_DB_URL", "postgresql://wealth")

    first = db_module.get_wealth_engine()

    assert db_module.get_wealth_engine() is first
    assert created == ["postgresql://wealth"]


def test_adapter_proxies_module_engine(monkeypatch):
    """The port adapter returns the module-level engine."""
    monkeypatch.setattr(db_module, "get_wealth_engine", lambda: "wealth")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_wealth_engine() == "wealth"
