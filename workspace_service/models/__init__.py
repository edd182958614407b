# File: /workspace_service/models/__init__.py | Version: 1.0 | Title: Models Package Exports
from .view import UTCDateTime, ViewTable, ViewType

__all__ = ["ViewTable", "ViewType", "UTCDateTime"]
