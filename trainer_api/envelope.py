"""
Trainer API — Response Envelope
=================================

What:  The only place HTTP statuses are chosen for handler outcomes.

Variants:
    Ok        → 200, empty body
    Data(T)   → 200, JSON body T (routes return the pydantic model; FastAPI
                serializes it with Content-Type: application/json)
    Error     → 500, empty body; the cause is logged server-side only
    NotFound  → 404, empty body (strict_not_found mode only)

Client errors raised by request parsing map to 400 (path) or 422 (body),
also with an empty body.
"""

from typing import Any, Dict, Sequence

from starlette.responses import Response

from trainer_api.exceptions import NotFoundError, TrainerApiError


def ok() -> Response:
    return Response(status_code=200)


def error() -> Response:
    return Response(status_code=500)


def not_found() -> Response:
    return Response(status_code=404)


def client_error(errors: Sequence[Dict[str, Any]]) -> Response:
    """
    Empty 4xx for a request rejected before any query ran.

    400 when any failing location is a path parameter, otherwise 422
    (malformed or mistyped JSON body).
    """
    for err in errors:
        loc = err.get("loc") or ()
        if loc and loc[0] == "path":
            return Response(status_code=400)
    return Response(status_code=422)


def for_exception(exc: TrainerApiError) -> Response:
    """Map an application exception onto its envelope variant."""
    if isinstance(exc, NotFoundError):
        return not_found()
    return error()
