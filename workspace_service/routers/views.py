# File: /workspace_service/routers/views.py | Version: 2.0 | Title: Views HTTP endpoints (create/read/update/delete + list by app)
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from workspace_service.crud import view as crud_view
from workspace_service.db.session import get_engine
from workspace_service.schemas.view import (
    CreateViewParams,
    QueryViewParams,
    UpdateViewBody,
    UpdateViewParams,
    ViewOut,
)

router = APIRouter(prefix="/views", tags=["Views"])


@router.post("", response_model=ViewOut, summary="Create a view")
def create_view(
    data: CreateViewParams,
    engine: Engine = Depends(get_engine),
):
    return crud_view.create_view(engine, data)


@router.get(
    "/by-app/{app_id}",
    response_model=List[ViewOut],
    summary="List the views that belong to an app",
)
def list_views_by_app(
    app_id: str,
    engine: Engine = Depends(get_engine),
):
    return crud_view.read_views_belong_to(engine, app_id)


@router.get("/{view_id}", response_model=ViewOut, summary="Read a view")
def read_view(
    view_id: str,
    read_belongings: bool = Query(default=False, description="Also load child views"),
    engine: Engine = Depends(get_engine),
):
    params = QueryViewParams(view_id=view_id, read_belongings=read_belongings)
    return crud_view.read_view(engine, params)


@router.patch("/{view_id}", summary="Update a view (only supplied fields change)")
def update_view(
    view_id: str,
    data: UpdateViewBody,
    engine: Engine = Depends(get_engine),
):
    # exclude_unset keeps "field sent" distinct from "field omitted"
    params = UpdateViewParams(view_id=view_id, **data.model_dump(exclude_unset=True))
    crud_view.update_view(engine, params)
    return {"detail": "View updated"}


@router.delete("/{view_id}", summary="Delete a view")
def delete_view(
    view_id: str,
    engine: Engine = Depends(get_engine),
):
    crud_view.delete_view(engine, view_id)
    return {"detail": "View deleted"}
