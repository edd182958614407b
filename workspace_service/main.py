# File: /workspace_service/main.py | Version: 1.1 | Title: FastAPI App (views + health routers, service error envelope)
from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from workspace_service.core.config import settings
from workspace_service.core.error_handlers import (
    register_exception_handlers,
    register_service_error_handler,
)
from workspace_service.core.logging import configure_logging
from workspace_service.observability.sentry import init_sentry_if_configured
from workspace_service.routers import health, views

# Initialize logging & observability
configure_logging()
init_sentry_if_configured()

# App
app = FastAPI(title="Workspace View Service")

app.include_router(views.router)
app.include_router(health.router)

# Parser/builder/infra errors always map to {"error": {...}} responses
register_service_error_handler(app)

# Optional standardized responses for plain HTTP/validation/unhandled errors
if getattr(settings, "ENABLE_STD_ERRORS", False):
    register_exception_handlers(app)


def run() -> None:
    # log_config=None keeps the dictConfig set up by configure_logging()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
