# File: /workspace_service/schemas/view.py | Version: 1.0 | Title: Pydantic v2 schemas for views (request params + ViewOut)
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from workspace_service.models.view import ViewType


# Request params carry raw strings; constraints are enforced by workspace_service.parsers
class CreateViewParams(BaseModel):
    belong_to_id: str
    name: str
    desc: str = ""
    thumbnail: str = ""
    view_type: ViewType = ViewType.BLANK


class QueryViewParams(BaseModel):
    view_id: str
    read_belongings: bool = False


class UpdateViewParams(BaseModel):
    view_id: str
    name: Optional[str] = None
    desc: Optional[str] = None
    thumbnail: Optional[str] = None
    is_trash: Optional[bool] = None

    def has(self, field: str) -> bool:
        """True iff the request explicitly carried ``field`` with a value."""
        return field in self.model_fields_set and getattr(self, field) is not None


class UpdateViewBody(BaseModel):
    """PATCH body; the view id comes from the path."""

    name: Optional[str] = None
    desc: Optional[str] = None
    thumbnail: Optional[str] = None
    is_trash: Optional[bool] = None


class ViewOut(BaseModel):
    id: str
    belong_to_id: str
    name: str
    desc: str = ""
    thumbnail: str = ""
    view_type: ViewType
    is_trash: bool = False
    version: int = 0
    create_time: datetime
    modified_time: datetime
    belongings: List[ViewOut] = Field(default_factory=list)

    # Pydantic v2 style
    model_config = ConfigDict(from_attributes=True)
