"""Global exception handlers.

Field-level validation failures become ``422`` responses whose body maps
each offending field to its list of messages, e.g.
``{"email": ["value is not a valid email address"]}``. A request whose body
or ``apartment`` envelope is missing, empty or malformed is rejected with
``400``.
"""

import logging
from collections.abc import Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import RecordInvalid

logger = logging.getLogger(__name__)

ENVELOPE_KEYS = {"apartment"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors."""
        errors = exc.errors()
        logger.warning(
            "Validation error on %s: %s",
            request.url.path,
            errors,
            extra={"path": request.url.path},
        )
        if any(_is_envelope_error(e) for e in errors):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": _envelope_message(errors)},
            )
        return JSONResponse(
            status_code=422,
            content=_build_field_errors(errors),
        )

    @app.exception_handler(RecordInvalid)
    async def record_invalid_handler(request: Request, exc: RecordInvalid):
        """Handle validation failures raised by services."""
        logger.warning(
            "Record invalid on %s: %s",
            request.url.path,
            exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=422,
            content=exc.errors,
        )


def _is_envelope_error(error: dict) -> bool:
    """True if the error concerns the request body as a whole."""
    loc = error["loc"]
    if error["type"] == "json_invalid":
        return True
    if loc[0] != "body":
        return False
    return len(loc) == 1 or (len(loc) == 2 and loc[1] in ENVELOPE_KEYS)


def _envelope_message(errors: Sequence[dict]) -> str:
    for error in errors:
        if error["type"] == "json_invalid":
            return "Malformed JSON body"
        loc = error["loc"]
        if len(loc) == 2 and loc[1] in ENVELOPE_KEYS:
            if error["type"] in ("missing", "value_error"):
                return f"param is missing or the value is empty: {loc[1]}"
            return f"{loc[1]} must be an object"
    return "Request body is required"


def _build_field_errors(errors: Sequence[dict]) -> dict[str, list[str]]:
    """Group validation messages by the field they belong to."""
    fields: dict[str, list[str]] = {}
    for error in errors:
        field = str(error["loc"][-1])
        fields.setdefault(field, []).append(error["msg"])
    return fields
