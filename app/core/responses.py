"""JSON response class and the reserved message payloads.

Every body the service emits is JSON with an explicit utf-8 charset; starlette's
stock JSONResponse omits the charset for non-text media types.
"""

from __future__ import annotations

from fastapi.responses import JSONResponse
from starlette import status

NOT_FOUND_MESSAGE = "NOT FOUND"
UNAUTHORIZED_MESSAGE = "UNAUTHORIZED"
INTERNAL_ERROR_MESSAGE = "INTERNAL SERVER ERROR"


class JSONUtf8Response(JSONResponse):
    media_type = "application/json; charset=utf-8"


def message_response(message: str, status_code: int) -> JSONUtf8Response:
    return JSONUtf8Response(status_code=status_code, content={"message": message})


def not_found_response() -> JSONUtf8Response:
    return message_response(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)


def unauthorized_response() -> JSONUtf8Response:
    return message_response(UNAUTHORIZED_MESSAGE, status.HTTP_401_UNAUTHORIZED)
