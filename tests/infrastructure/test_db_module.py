"""Tests for the infrastructure.db module."""

import pytest

from meal_billing.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("BILLING_DB_URL", "sqlite:///example.db")

    assert db_module._get_env_var("BILLING_DB_URL") == "sqlite:///example.db"


def test_get_env_var_uses_default_or_raises(monkeypatch):
    """Missing variables should use the default, else raise."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("BILLING_DB_URL", raising=False)

    assert db_module._get_env_var("BILLING_DB_URL", "fallback") == "fallback"
    with pytest.raises(RuntimeError):
        db_module._get_env_var("BILLING_DB_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("sqlite:///kitchen.db")

    assert engine == "engine"
    assert captured["db_url"] == "sqlite:///kitchen.db"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_billing_engine_caches_engine(monkeypatch):
    """get_billing_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_billing_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("BILLING_DB_URL", "sqlite:///kitchen.db")

    engine_one = db_module.get_billing_engine()
    engine_two = db_module.get_billing_engine()

    assert engine_one == "engine:sqlite:///kitchen.db"
    assert engine_two is engine_one
    assert created == ["sqlite:///kitchen.db"]


def test_adapter_prefers_injected_engine(monkeypatch):
    """An injected engine should be returned instead of the singleton."""
    monkeypatch.setattr(
        db_module,
        "get_billing_engine",
        lambda: pytest.fail("singleton should not be used"),
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("injected")

    assert adapter.get_billing_engine() == "injected"


def test_get_engine_for_url_reuses_engine_per_url(monkeypatch):
    """Each distinct URL should get exactly one engine."""
    monkeypatch.setattr(db_module, "_engines_by_url", {})
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)

    first = db_module.get_engine_for_url("sqlite:///a.db")
    again = db_module.get_engine_for_url("sqlite:///a.db")
    other = db_module.get_engine_for_url("sqlite:///b.db")

    assert first is again
    assert other == "engine:sqlite:///b.db"
    assert created == ["sqlite:///a.db", "sqlite:///b.db"]
