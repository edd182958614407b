# File: /workspace_service/routers/__init__.py | Version: 1.2 | Path: /workspace_service/routers/__init__.py
"""
Router package exports.

Keeping these explicit helps static analyzers and avoids surprises
when importing submodules like: `from workspace_service.routers import views`.
"""
from . import health, views

__all__ = ["health", "views"]
