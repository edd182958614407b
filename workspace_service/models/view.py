# File: /workspace_service/models/view.py | Version: 1.0 | Title: SQLAlchemy table for hierarchical views
from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Boolean, DateTime, Index, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from workspace_service.db.base_class import Base


class ViewType(int, Enum):
    BLANK = 0
    DOC = 1


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware UTC timestamps on every backend.

    SQLite stores DATETIME without an offset; values read back are tagged UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value

    def process_result_value(self, value: Optional[datetime], dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class ViewTable(Base):
    __tablename__ = "view_table"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # Owning app (or parent view); opaque identifier, no FK
    belong_to_id: Mapped[str] = mapped_column(String(36), nullable=False)

    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    thumbnail: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    view_type: Mapped[int] = mapped_column(Integer, nullable=False, default=ViewType.BLANK.value)
    is_trash: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false())

    modified_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    create_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

    __table_args__ = (Index("ix_view_table_belong_to_id", "belong_to_id"),)
