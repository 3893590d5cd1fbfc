"""
Client-fault errors raised by the service layer and their HTTP rendering.

Every error names the entity type and a machine-readable reason code
(idexists, idnull, idinvalid, idnotfound, sortinvalid). Store failures are
not translated here; they surface as 500s.
"""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from workforce.core.config import get_settings
from workforce.core.logging import get_logger

logger = get_logger(__name__)

PROBLEM_BASE_URL = "/problems"
PROBLEM_WITH_MESSAGE = f"{PROBLEM_BASE_URL}/problem-with-message"
CONSTRAINT_VIOLATION = f"{PROBLEM_BASE_URL}/constraint-violation"


class WorkforceError(Exception):
    """Base for request errors that carry an entity name and a reason code."""

    status_code = 400

    def __init__(self, entity_name: str, reason: str, message: str) -> None:
        super().__init__(message)
        self.entity_name = entity_name
        self.reason = reason
        self.message = message


class ValidationError(WorkforceError):
    """Malformed or self-contradictory request (id null, id mismatch, bad sort key)."""


class ConflictError(ValidationError):
    """A create request already carries an identity."""

    def __init__(self, entity_name: str, message: str = "id already present") -> None:
        super().__init__(entity_name, "idexists", message)


class NotFoundError(WorkforceError):
    """The referenced identity is not in the store."""

    def __init__(self, entity_name: str, message: str = "Entity not found") -> None:
        super().__init__(entity_name, "idnotfound", message)


def error_headers(entity_name: str, reason: str) -> dict[str, str]:
    app_name = get_settings().application_name
    return {
        f"X-{app_name}-error": f"error.{reason}",
        f"X-{app_name}-params": entity_name,
    }


def problem_body(exc: WorkforceError) -> dict[str, Any]:
    return {
        "type": PROBLEM_WITH_MESSAGE,
        "title": exc.message,
        "status": exc.status_code,
        "detail": f"error.{exc.reason}",
        "entityName": exc.entity_name,
        "errorKey": exc.reason,
        "message": f"error.{exc.reason}",
        "params": exc.entity_name,
    }


async def workforce_error_handler(request: Request, exc: WorkforceError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} rejected: {exc.entity_name}.{exc.reason} ({exc.message})")
    return JSONResponse(
        status_code=exc.status_code,
        content=problem_body(exc),
        headers=error_headers(exc.entity_name, exc.reason),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bean-style validation failures answer 400, not FastAPI's default 422."""
    field_errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    logger.info(f"{request.method} {request.url.path} failed validation: {field_errors}")
    return JSONResponse(
        status_code=400,
        content={
            "type": CONSTRAINT_VIOLATION,
            "title": "Method argument not valid",
            "status": 400,
            "message": "error.validation",
            "errorKey": "validation",
            "fieldErrors": field_errors,
        },
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WorkforceError, workforce_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
