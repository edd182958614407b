# File: /workspace_service/db/__init__.py | Version: 1.1 | Path: /workspace_service/db/__init__.py
# Import models so Base.metadata knows every table before create_all()/alembic run
import workspace_service.models  # noqa: F401

from .base_class import Base
from .session import engine, get_engine

__all__ = ["Base", "engine", "get_engine"]
