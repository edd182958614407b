# File: /workspace_service/routers/health.py | Version: 1.1 | Title: Health & readiness endpoints
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from workspace_service.db.session import get_engine

log = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/healthz")
def healthz() -> dict:
    """
    Liveness probe: returns 200 if the service can answer requests.
    """
    return {"status": "ok"}


@router.get("/readyz")
def readyz(engine: Engine = Depends(get_engine)):
    """
    Readiness probe: 200 if a pooled connection can run SELECT 1, else 503.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ok", "db": "ok"}
    except SQLAlchemyError as exc:
        log.warning("Readiness check failed: %s", exc.__class__.__name__)
        return JSONResponse({"status": "degraded", "db": "error"}, status_code=503)
