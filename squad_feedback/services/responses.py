"""Response submission with compensating cleanup."""

import logging
import uuid
from typing import Any

from squad_feedback.core.exceptions import (
    InvalidRequestError,
    RecordNotFoundError,
    ResourceNotFoundError,
    StorageError,
)
from squad_feedback.models import Response
from squad_feedback.services.gateway import Gateway

logger = logging.getLogger(__name__)


def classify_answer(answer: Any) -> dict[str, Any]:
    """Map a raw answer to the single answer column it is stored in."""
    if isinstance(answer, bool):
        return {"answer_choice": "yes" if answer else "no"}
    if isinstance(answer, (int, float)):
        return {"answer_numeric": answer}
    if isinstance(answer, str):
        if answer in ("yes", "no"):
            return {"answer_choice": answer}
        return {"answer_text": answer}
    return {"answer_text": str(answer)}


def submit_response(
    gateway: Gateway,
    form_id: uuid.UUID,
    answers: dict[str, Any],
    user_id: uuid.UUID | None = None,
    is_anonymous: bool = False,
    completion_time_seconds: int | None = None,
) -> Response:
    """Store a response and its per-question answers.

    The response row and the answer rows are written separately. If the
    answers cannot be stored the response row is deleted again so no empty
    response is left behind.
    """
    try:
        form = gateway.get_by_id("forms", form_id)
    except RecordNotFoundError:
        raise ResourceNotFoundError("Form not found") from None

    if form.status != "active":
        raise InvalidRequestError("Form is not accepting responses")
    if is_anonymous and not form.allow_anonymous:
        raise InvalidRequestError("Anonymous responses are not allowed for this form")
    if not is_anonymous and user_id is None:
        raise InvalidRequestError("User ID is required")
    if not answers:
        raise InvalidRequestError("Missing responses")

    response = gateway.insert(
        "responses",
        {
            "form_id": form.id,
            "user_id": None if is_anonymous else user_id,
            "is_anonymous": is_anonymous,
            "completion_time_seconds": completion_time_seconds,
        },
    )

    rows = [
        {"response_id": response.id, "question_id": str(question_id), **classify_answer(answer)}
        for question_id, answer in answers.items()
    ]
    try:
        gateway.insert_many("question_responses", rows)
    except StorageError:
        logger.warning("Answer insert failed for response %s; removing response row", response.id)
        gateway.delete("responses", response.id)
        raise

    logger.info(
        "Stored response %s for form %s (%d answers, anonymous=%s)",
        response.id,
        form.id,
        len(rows),
        is_anonymous,
    )
    return response
