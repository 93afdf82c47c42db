"""
JSON response helpers shared by both services.
"""
import json
import logging
from typing import Any, Mapping, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


class IndentedJSONResponse(JSONResponse):
    """JSON body pretty-printed with two-space indentation."""

    media_type = JSON_MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content, status_code=status_code, media_type=JSON_MEDIA_TYPE)


def error_response(message: str, status_code: int) -> JSONResponse:
    """Single-field error body; never carries internal error text."""
    return json_response({"message": message}, status_code=status_code)


def empty_response(status_code: int, headers: Optional[Mapping[str, str]] = None) -> Response:
    return Response(status_code=status_code, media_type=JSON_MEDIA_TYPE, headers=dict(headers or {}))


async def incorrect_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Undecodable request bodies are client errors (400), not 422."""
    logger.debug("rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response("incorrect body", 400)
