from fastapi import Request
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from .responses import (
    INTERNAL_ERROR_MESSAGE,
    message_response,
    not_found_response,
)

logger = logging.getLogger("app.errors")


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return not_found_response()
    detail = exc.detail if isinstance(exc.detail, str) else "ERROR"
    return message_response(detail.upper(), exc.status_code)


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    # handler runs outside the except block, so pass the exception explicitly
    logger.error(
        "unhandled exception on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return message_response(
        INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
