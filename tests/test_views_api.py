# File: /tests/test_views_api.py | Version: 3.0 | Title: Views HTTP lifecycle + error envelopes
from __future__ import annotations

import uuid
from typing import Any, Dict

APP_ID = "9b2d3c8e-6a1f-4e7b-8c5d-1a2b3c4d5e6f"


def _create(client, name: str = "Notes", **extra) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"name": name, "belong_to_id": APP_ID, **extra}
    r = client.post("/views", json=payload)
    assert r.status_code == 200, r.text
    return r.json()


def test_views_crud_lifecycle(client):
    # --- Create ---
    created = _create(client, thumbnail="", desc="")
    view_id = created["id"]
    assert created["version"] == 0
    assert created["belongings"] == []
    assert created["view_type"] == 0

    # --- Update one field ---
    r = client.patch(f"/views/{view_id}", json={"name": "Notes v2"})
    assert r.status_code == 200, r.text
    assert r.json()["detail"] == "View updated"

    # --- Read ---
    r = client.get(f"/views/{view_id}", params={"read_belongings": "false"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["name"] == "Notes v2"
    assert body["desc"] == ""
    assert body["create_time"] == created["create_time"]

    # --- Delete (twice) ---
    for _ in range(2):
        r = client.delete(f"/views/{view_id}")
        assert r.status_code == 200
        assert r.json()["detail"] == "View deleted"

    # Verify gone
    r = client.get(f"/views/{view_id}")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_read_with_belongings_and_list_by_app(client):
    parent = _create(client, name="parent")
    kids = {
        _create(client, name=f"kid {i}", belong_to_id=parent["id"])["id"] for i in range(3)
    }

    r = client.get(f"/views/{parent['id']}", params={"read_belongings": "true"})
    assert r.status_code == 200, r.text
    assert {v["id"] for v in r.json()["belongings"]} == kids

    r = client.get(f"/views/by-app/{APP_ID}")
    assert r.status_code == 200, r.text
    assert [v["id"] for v in r.json()] == [parent["id"]]


def test_trash_flag_via_patch(client):
    view_id = _create(client)["id"]
    r = client.patch(f"/views/{view_id}", json={"is_trash": True})
    assert r.status_code == 200, r.text
    assert client.get(f"/views/{view_id}").json()["is_trash"] is True

    client.patch(f"/views/{view_id}", json={"desc": "still trashed"})
    body = client.get(f"/views/{view_id}").json()
    assert body["is_trash"] is True
    assert body["desc"] == "still trashed"


def test_create_with_empty_name_is_rejected(client):
    r = client.post("/views", json={"name": "", "belong_to_id": APP_ID})
    assert r.status_code == 400
    err = r.json()["error"]
    assert err["code"] == "INVALID_PARAMS"
    assert err["field"] == "name"

    r = client.get(f"/views/by-app/{APP_ID}")
    assert r.json() == []


def test_malformed_ids_are_invalid_params(client):
    assert client.get("/views/not-a-uuid").status_code == 400
    assert client.patch("/views/not-a-uuid", json={"name": "x"}).status_code == 400
    r = client.delete("/views/not-a-uuid")
    assert r.status_code == 400
    assert r.json()["error"]["field"] == "view_id"


def test_unknown_view_type_is_rejected_by_request_schema(client):
    r = client.post("/views", json={"name": "x", "belong_to_id": APP_ID, "view_type": 7})
    assert r.status_code == 422


def test_infra_failure_is_opaque(client, broken_engine):
    from workspace_service.db.session import get_engine
    from workspace_service.main import app

    app.dependency_overrides[get_engine] = lambda: broken_engine
    r = client.delete(f"/views/{uuid.uuid4()}")
    assert r.status_code == 500
    assert r.json() == {
        "error": {"code": "INTERNAL_SERVER_ERROR", "message": "Internal server error"}
    }

    r = client.get("/readyz")
    assert r.status_code == 503
