"""Exception handlers producing the shared error body.

Body shape: ``{status, message, timestamp, fields?}``.
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from researchsurvey.domain.clock import utc_now
from researchsurvey.domain.errors import DomainError, NotFoundError

from .schemas.error import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Requested resource not found"


def error_response(
    status_code: int, message: str, fields: Optional[List[FieldError]] = None
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code, message=message, timestamp=utc_now(), fields=fields
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = [
        FieldError(
            name=".".join(str(part) for part in error["loc"] if part != "body"),
            message=error["msg"],
        )
        for error in exc.errors()
    ]
    return error_response(
        status.HTTP_400_BAD_REQUEST, "One or more fields are invalid", fields
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette picks the most specific class first
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
