"""JSON Responses — the one response class every endpoint and error handler uses.

Invariants:
    - Content-Type is exactly "application/json; charset=UTF-8"
    - Error bodies are built only through core.errors.error_envelope
"""

from fastapi.responses import JSONResponse

from snickers.core.errors import SnickersError, error_envelope


class JSONUTF8Response(JSONResponse):
    media_type = "application/json; charset=UTF-8"


def error_response(
    status_code: int, context: str, cause: str, headers: dict | None = None,
) -> JSONUTF8Response:
    return JSONUTF8Response(
        status_code=status_code,
        content=error_envelope(context, cause),
        headers=headers,
    )


def snickers_error_response(exc: SnickersError) -> JSONUTF8Response:
    return JSONUTF8Response(
        status_code=exc.http_status, content=exc.to_response(),
    )
