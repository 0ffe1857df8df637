# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..domain.exceptions import InternalError, SocialBackendError, UnauthenticatedError

logger = logging.getLogger(__name__)


async def handle_domain_error(request: Request, exception: SocialBackendError) -> JSONResponse:
    """Map a domain error to its status code and message"""
    if isinstance(exception, InternalError):
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exception.message,
        )

    headers = None
    if isinstance(exception, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=exception.status_code,
        content={"detail": exception.message},
        headers=headers,
    )


async def handle_validation_error(request: Request, exception: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors (400), not 422"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_errors(exception)},
    )


async def handle_unexpected_error(request: Request, exception: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def jsonable_errors(exception: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exception.errors()
    ]


def register_error_handlers(application: FastAPI) -> None:
    """Install the error-to-response mapping on an application"""
    application.add_exception_handler(SocialBackendError, handle_domain_error)
    application.add_exception_handler(RequestValidationError, handle_validation_error)
    application.add_exception_handler(Exception, handle_unexpected_error)
