# database.py
# Engine factory, table creation and the request-scoped store/team dependencies.

from typing import List

from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from league_ledger.core.config import DATABASE_URL, DATABASE_ECHO


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


# --- Engine factory ---
def build_engine(url: str = DATABASE_URL, echo: bool = DATABASE_ECHO):
    """
    Create a sync engine for the given URL.
    SQLite connections are shared across FastAPI's threadpool, so
    check_same_thread is disabled. In-memory databases keep one
    connection alive (StaticPool) so every session sees the same data.
    """
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_url(url):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


# --- Initialize DB tables ---
def init_db(engine) -> None:
    """Create tables if they don't exist."""
    # Import models so their tables are registered on SQLModel.metadata
    from league_ledger import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


# --- Request-scoped access (used in routes) ---
def get_store(request: Request):
    return request.app.state.store


def get_teams(request: Request) -> List[str]:
    return request.app.state.teams
