# File: /workspace_service/core/errors.py | Version: 1.0 | Title: Service error taxonomy
"""
Errors raised by the parsers, the statement builder, the transaction envelope
and the view CRUD layer.

Every error knows the HTTP status and the short code it is reported with, so
the API layer can translate it without inspecting the type.
"""
from __future__ import annotations

from typing import Optional


class ServiceError(Exception):
    status_code = 500
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def public_message(self) -> str:
        return self.message

    def to_payload(self) -> dict:
        return {"error": {"code": self.code, "message": self.public_message()}}


class ValidationError(ServiceError):
    """Raw input failed a parser constraint. Always recoverable."""

    status_code = 400
    code = "INVALID_PARAMS"

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["error"]["field"] = self.field
        return payload


class NotFoundError(ServiceError):
    status_code = 404
    code = "NOT_FOUND"


class BuildError(ServiceError):
    """The statement builder was asked for a statement it cannot produce."""

    code = "BUILD_ERROR"


class InfraError(ServiceError):
    """
    Connection acquisition, statement execution or commit failed.

    The message is for logs only; callers always see an opaque message.
    """

    kind = "infra"

    def __init__(self, message: str, *, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation

    def public_message(self) -> str:
        return "Internal server error"


class InvariantViolation(InfraError):
    # A lookup by unique id matched more than one row.
    kind = "invariant"


__all__ = [
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "BuildError",
    "InfraError",
    "InvariantViolation",
]
