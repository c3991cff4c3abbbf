"""Database connection and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookish.config import get_settings

settings = get_settings()


def engine_options(database_url: str, timeout: float, echo: bool = False) -> dict:
    """Keyword arguments for ``create_engine`` that bound store calls by ``timeout``.

    Postgres gets a pool checkout timeout, a connect timeout and a server-side
    statement timeout. SQLite only gets a lock wait timeout: it has no
    statement timeout, so long statements there are not bounded. In-memory
    SQLite shares one connection so every session sees the same database.
    """
    url = make_url(database_url)
    backend = url.get_backend_name()
    options: dict = {
        "pool_pre_ping": True,  # Verify connections before using
        "echo": echo,  # Log SQL queries in debug mode
    }

    if backend == "sqlite":
        options["connect_args"] = {"check_same_thread": False, "timeout": timeout}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    options["pool_timeout"] = timeout
    if backend == "postgresql":
        options["connect_args"] = {
            "connect_timeout": max(1, int(timeout)),
            "options": f"-c statement_timeout={int(timeout * 1000)}",
        }
    return options


def build_engine(database_url: str, timeout: float, echo: bool = False) -> Engine:
    """Create an engine whose store calls are bounded by ``timeout`` seconds."""
    return create_engine(database_url, **engine_options(database_url, timeout, echo))


# Create database engine
engine = build_engine(
    settings.database_url,
    timeout=settings.store_timeout_seconds,
    echo=settings.debug,
)

# Create session factory
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions.

    Request handling never writes, so the session is only closed, not
    committed.

    Usage in FastAPI endpoints:
        @router.get("/books")
        def list_books(db: Session = Depends(get_db)):
            return book_service.find_books(db)
    """
    with SessionLocal() as session:
        yield session
