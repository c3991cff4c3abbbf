"""Tests for engine construction and store timeouts."""

from sqlalchemy.pool import StaticPool

from bookish.core.database import build_engine, engine_options


def test_postgres_options_bound_every_store_call():
    options = engine_options("postgresql+psycopg2://user@db/bookish", timeout=2.5)

    assert options["pool_timeout"] == 2.5
    assert options["connect_args"]["connect_timeout"] == 2
    assert options["connect_args"]["options"] == "-c statement_timeout=2500"


def test_postgres_connect_timeout_is_at_least_one_second():
    options = engine_options("postgresql+psycopg2://user@db/bookish", timeout=0.2)

    assert options["connect_args"]["connect_timeout"] == 1
    assert options["connect_args"]["options"] == "-c statement_timeout=200"


def test_postgres_engine_applies_pool_timeout():
    engine = build_engine("postgresql+psycopg2://user@db/bookish", timeout=3)

    try:
        assert engine.pool.timeout() == 3
    finally:
        engine.dispose()


def test_sqlite_options_use_lock_timeout_only():
    options = engine_options("sqlite:///books.db", timeout=4)

    assert options["connect_args"] == {"check_same_thread": False, "timeout": 4}
    assert "pool_timeout" not in options
    assert "poolclass" not in options


def test_in_memory_sqlite_shares_one_connection():
    options = engine_options("sqlite://", timeout=1)

    assert options["poolclass"] is StaticPool
