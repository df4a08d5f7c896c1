"""
CORS headers and response helpers for the translation gateway.

The gateway writes these headers itself on every response, preflight included.
"""
from typing import Any, Dict

from fastapi.responses import JSONResponse, Response

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def preflight_response() -> Response:
    """Empty 200 answer to a CORS preflight."""
    return Response(status_code=200, headers=dict(CORS_HEADERS))


def json_response(payload: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=payload, status_code=status_code, headers=dict(CORS_HEADERS))


def error_response(message: str, status_code: int) -> JSONResponse:
    return json_response({"error": message}, status_code=status_code)
