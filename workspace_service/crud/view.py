# File: /workspace_service/crud/view.py | Version: 1.4 | Title: Transactional CRUD for views (parse -> begin -> build/execute -> commit)
from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import List, Mapping, Optional

from sqlalchemy.engine import Engine

from workspace_service.core.errors import InvariantViolation, NotFoundError
from workspace_service.db.sql_builder import SqlBuilder
from workspace_service.db.transaction import Transaction, begin_transaction
from workspace_service.models.view import ViewTable
from workspace_service.parsers import (
    parse_app_id,
    parse_view_desc,
    parse_view_id,
    parse_view_name,
    parse_view_thumbnail,
)
from workspace_service.schemas.view import (
    CreateViewParams,
    QueryViewParams,
    UpdateViewParams,
    ViewOut,
)

log = logging.getLogger(__name__)

VIEW_TABLE = ViewTable.__tablename__

# Result column types, so drivers returning text (SQLite) still yield datetimes/bools
_VIEW_COLUMNS = {c.name: c.type for c in ViewTable.__table__.columns}


def _row_to_view(row: Mapping) -> ViewOut:
    return ViewOut(
        id=row["id"],
        belong_to_id=row["belong_to_id"],
        name=row["name"],
        desc=row["description"],
        thumbnail=row["thumbnail"],
        view_type=row["view_type"],
        is_trash=bool(row["is_trash"]),
        version=0,
        create_time=row["create_time"],
        modified_time=row["modified_time"],
        belongings=[],
    )


def create_view(engine: Engine, params: CreateViewParams) -> ViewOut:
    name = parse_view_name(params.name)
    belong_to_id = parse_app_id(params.belong_to_id)
    thumbnail = parse_view_thumbnail(params.thumbnail)
    desc = parse_view_desc(params.desc)

    view_id = str(uuid.uuid4())
    now = datetime.now(UTC)

    with begin_transaction(engine, "create view") as tx:
        statement = (
            SqlBuilder.create(VIEW_TABLE)
            .add_arg("id", view_id)
            .add_arg("belong_to_id", belong_to_id)
            .add_arg("name", name)
            .add_arg("description", desc)
            .add_arg("modified_time", now)
            .add_arg("create_time", now)
            .add_arg("thumbnail", thumbnail)
            .add_arg("view_type", params.view_type.value)
            .build()
        )
        tx.execute(statement)
        tx.commit()

    log.info("Created view %s in %s", view_id, belong_to_id)
    return ViewOut(
        id=view_id,
        belong_to_id=belong_to_id,
        name=name,
        desc=desc,
        thumbnail=thumbnail,
        view_type=params.view_type,
        is_trash=False,
        version=0,
        create_time=now,
        modified_time=now,
        belongings=[],
    )


def read_view(engine: Engine, params: QueryViewParams) -> ViewOut:
    view_id = parse_view_id(params.view_id)

    with begin_transaction(engine, "read view") as tx:
        statement = (
            SqlBuilder.select(VIEW_TABLE).add_field("*").and_where_eq("id", view_id).build()
        )
        rows = tx.fetch_all(statement, _VIEW_COLUMNS)
        if not rows:
            log.info("View %s not found", view_id)
            raise NotFoundError(f"View {view_id} not found")
        if len(rows) > 1:
            log.error(
                "View id %s matched %d rows",
                view_id,
                len(rows),
                extra={"error_kind": InvariantViolation.kind},
            )
            raise InvariantViolation(f"View id {view_id} is not unique", operation="read view")

        view = _row_to_view(rows[0])
        if params.read_belongings:
            view.belongings = read_views_belong_to_id(tx, view.id)

        tx.commit()

    return view


def update_view(engine: Engine, params: UpdateViewParams) -> None:
    view_id = parse_view_id(params.view_id)
    name: Optional[str] = parse_view_name(params.name) if params.has("name") else None
    desc: Optional[str] = parse_view_desc(params.desc) if params.has("desc") else None
    thumbnail: Optional[str] = (
        parse_view_thumbnail(params.thumbnail) if params.has("thumbnail") else None
    )

    with begin_transaction(engine, "update view") as tx:
        statement = (
            SqlBuilder.update(VIEW_TABLE)
            .add_some_arg("name", name)
            .add_some_arg("description", desc)
            .add_some_arg("thumbnail", thumbnail)
            .add_some_arg("modified_time", datetime.now(UTC))
            # presence, not value: an explicit false still untrashes
            .add_arg_if(params.has("is_trash"), "is_trash", params.is_trash)
            .and_where_eq("id", view_id)
            .build()
        )
        updated = tx.execute(statement)
        tx.commit()

    log.info("Updated view %s (%d row(s))", view_id, updated)


def delete_view(engine: Engine, view_id: str) -> None:
    checked_id = parse_view_id(view_id)

    with begin_transaction(engine, "delete view") as tx:
        statement = SqlBuilder.delete(VIEW_TABLE).and_where_eq("id", checked_id).build()
        deleted = tx.execute(statement)
        tx.commit()

    # Zero rows is still success: delete is idempotent
    log.info("Deleted view %s (%d row(s))", checked_id, deleted)


def read_views_belong_to_id(tx: Transaction, belong_to_id: str) -> List[ViewOut]:
    # Runs inside the caller's transaction; the caller commits.
    statement = (
        SqlBuilder.select(VIEW_TABLE)
        .add_field("*")
        .and_where_eq("belong_to_id", belong_to_id)
        .build()
    )
    return [_row_to_view(row) for row in tx.fetch_all(statement, _VIEW_COLUMNS)]


def read_views_belong_to(engine: Engine, belong_to_id: str) -> List[ViewOut]:
    app_id = parse_app_id(belong_to_id)

    with begin_transaction(engine, "read views") as tx:
        views = read_views_belong_to_id(tx, app_id)
        tx.commit()

    return views
