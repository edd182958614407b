# File: /workspace_service/db/session.py | Version: 1.2 | Title: SQLAlchemy Engine (connection pool) using Central Settings
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from workspace_service.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL


def build_engine(url: str) -> Engine:
    kwargs: Dict[str, Any] = {"pool_pre_ping": True, "echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        # Callers beyond pool_size + max_overflow block up to pool_timeout
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )
    return create_engine(url, **kwargs)


engine = build_engine(SQLALCHEMY_DATABASE_URL)


def get_engine() -> Engine:
    return engine
