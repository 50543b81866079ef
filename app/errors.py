from http import HTTPStatus

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.error import FieldError, ProblemDetail
from app.utils.headers import failure_alert


logger = structlog.get_logger(__name__)


class AlertError(Exception):
    """
    Base error for failures reported to the client with an alert.
    Carries the entity name and a short error key (e.g. ``idexists``).
    """

    status_code = status.HTTP_400_BAD_REQUEST
    title = "Bad Request"

    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key

    def to_problem(self) -> ProblemDetail:
        return ProblemDetail(
            title=self.title,
            status=self.status_code,
            detail=self.message,
            message=f"error.{self.error_key}",
            entity_name=self.entity_name,
            error_key=self.error_key,
        )


class ValidationError(AlertError):
    """Malformed or conflicting identifiers in a request."""


class AuthorizationError(AlertError):
    """Role or membership check failed. Reported as 400, not 403."""


class NotFoundError(AlertError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    title = "Not Found"


async def alert_error_handler(request: Request, exc: AlertError) -> JSONResponse:
    logger.info(
        "request.rejected",
        path=request.url.path,
        error=type(exc).__name__,
        error_key=exc.error_key,
        detail=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_problem().to_content(),
        headers=failure_alert(exc.entity_name, exc.error_key),
    )


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    field_errors = [
        FieldError(field=_field_name(tuple(err.get("loc", ()))), message=err.get("msg", ""))
        for err in exc.errors()
    ]
    logger.info("request.invalid", path=request.url.path, errors=len(field_errors))
    problem = ProblemDetail(
        title="Method argument not valid",
        status=status.HTTP_400_BAD_REQUEST,
        message="error.validation",
        field_errors=field_errors,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.to_content(),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    logger.info("request.failed", path=request.url.path, status=exc.status_code, detail=exc.detail)
    problem = ProblemDetail(
        title=HTTPStatus(exc.status_code).phrase,
        status=exc.status_code,
        detail=str(exc.detail),
        message=f"error.http.{exc.status_code}",
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=problem.to_content(),
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that turn domain errors into HTTP responses."""
    app.add_exception_handler(AlertError, alert_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
