# File: /workspace_service/parsers.py | Version: 1.1 | Title: Constrained value parsers for view input
"""
Turn untrusted request strings into constrained values.

Each parser is pure: it either returns the typed value or raises
``errors.ValidationError`` naming the offending field. Nothing here touches
the database, so all parsing can finish before a transaction is opened.
"""
from __future__ import annotations

import uuid
from typing import NewType, Optional

from workspace_service.core.errors import ValidationError

VIEW_NAME_MAX_LENGTH = 256
VIEW_DESC_MAX_LENGTH = 1000
VIEW_THUMBNAIL_MAX_LENGTH = 1000

ViewName = NewType("ViewName", str)
ViewDesc = NewType("ViewDesc", str)
ViewThumbnail = NewType("ViewThumbnail", str)
ViewId = NewType("ViewId", str)
AppId = NewType("AppId", str)


def _bounded(value: str, *, field: str, max_length: int, allow_empty: bool) -> str:
    if not value and not allow_empty:
        raise ValidationError(field, f"{field} is empty")
    if len(value) > max_length:
        raise ValidationError(field, f"{field} is too long (max {max_length} characters)")
    return value


def parse_view_name(raw: Optional[str]) -> ViewName:
    # names are trimmed; description and thumbnail are stored exactly as given
    name = (raw or "").strip()
    return ViewName(
        _bounded(name, field="name", max_length=VIEW_NAME_MAX_LENGTH, allow_empty=False)
    )


def parse_view_desc(raw: Optional[str]) -> ViewDesc:
    return ViewDesc(
        _bounded(raw or "", field="description", max_length=VIEW_DESC_MAX_LENGTH, allow_empty=True)
    )


def parse_view_thumbnail(raw: Optional[str]) -> ViewThumbnail:
    return ViewThumbnail(
        _bounded(
            raw or "", field="thumbnail", max_length=VIEW_THUMBNAIL_MAX_LENGTH, allow_empty=True
        )
    )


def _parse_uuid(raw: Optional[str], field: str) -> str:
    value = (raw or "").strip()
    if not value:
        raise ValidationError(field, f"{field} is empty")
    try:
        parsed = str(uuid.UUID(value))
    except ValueError:
        raise ValidationError(field, f"{field} is not a valid identifier")
    # uuid.UUID also accepts braces, urn: prefixes and bare hex; only the
    # 8-4-4-4-12 hyphenated form is canonical
    if parsed != value.lower():
        raise ValidationError(field, f"{field} is not a valid identifier")
    return parsed


def parse_view_id(raw: Optional[str]) -> ViewId:
    return ViewId(_parse_uuid(raw, "view_id"))


def parse_app_id(raw: Optional[str]) -> AppId:
    return AppId(_parse_uuid(raw, "belong_to_id"))
