"""Error responses for the HTTP layer.

Every error body is ``{"error": message}``; structure validation failures add
``errors`` with the validator's messages.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from squad_feedback.core.exceptions import FeedbackError, StructureValidationError, UnexpectedError

logger = logging.getLogger(__name__)


@contextmanager
def guard(message: str) -> Iterator[None]:
    """Turn any non-domain exception raised inside the block into a 500.

    The cause is logged here and never sent to the client.
    """
    try:
        yield
    except (FeedbackError, HTTPException):
        raise
    except Exception as exc:
        logger.exception("%s", message)
        raise UnexpectedError(message) from exc


async def feedback_error_handler(request: Request, exc: FeedbackError) -> JSONResponse:
    body: dict = {"error": exc.message}
    if isinstance(exc, StructureValidationError):
        body["errors"] = exc.errors
    if exc.status_code >= 500:
        logger.error("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FeedbackError, feedback_error_handler)
