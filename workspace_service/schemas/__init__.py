# File: /workspace_service/schemas/__init__.py | Version: 1.0 | Path: /workspace_service/schemas/__init__.py
from . import view

__all__ = ["view"]
