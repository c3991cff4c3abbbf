"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bookish.api.errors import register_error_handlers
from bookish.api.routes import books
from bookish.config import get_settings
from bookish.constants import GREETING
from bookish.core.database import engine
from bookish.models.database import Base
from bookish.services.seed_loader import reseed_from_file

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def prepare_store() -> None:
    """Create the books table and, if requested, reseed it.

    Runs to completion before the app accepts requests. Any failure
    propagates and aborts startup.
    """
    current = get_settings()
    Base.metadata.create_all(bind=engine)

    if current.reset_db:
        logger.info(f"RESET_DB set, reseeding from {current.seed_data_path}")
        inserted = reseed_from_file(current.seed_data_path)
        logger.info(f"Store ready with {inserted} books")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await run_in_threadpool(prepare_store)
    yield


# Create FastAPI application
app = FastAPI(
    title="Bookish - Book Catalog API",
    description="Read-only book catalog with author search and top rated listings",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/", response_class=PlainTextResponse)
def read_root():
    """Greeting endpoint."""
    return GREETING


@app.get("/health")
def health_check():
    """Detailed health check endpoint."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the store: {e}")
        database = "unavailable"

    return {
        "status": "healthy" if database == "connected" else "degraded",
        "environment": settings.environment,
        "database": database,
    }


app.include_router(books.router, prefix="/books", tags=["books"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
