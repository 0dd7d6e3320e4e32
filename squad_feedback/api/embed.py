"""Embeddable feedback page for coaches and players.

Host sites point an iframe at ``/feedback/{event_id}/{user_type}/{user_id}``.
Bad parameters render an inline error block rather than an empty frame.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from squad_feedback.core.config import settings
from squad_feedback.core.exceptions import RecordNotFoundError
from squad_feedback.services.gateway import Gateway, get_gateway
from squad_feedback.services.structure import extract_sections, question_key

logger = logging.getLogger(__name__)

router = APIRouter(tags=["embed"])

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

USER_TYPES = ("coach", "player")


def _render(request: Request, context: dict, status_code: int = 200) -> HTMLResponse:
    context = {"app_title": settings.PROJECT_NAME, "api_prefix": settings.API_PREFIX, **context}
    response = templates.TemplateResponse(request, "feedback.html", context, status_code=status_code)
    response.headers["Content-Security-Policy"] = "frame-ancestors " + " ".join(settings.EMBED_ALLOWED_ORIGINS)
    return response


def _error(request: Request, message: str, status_code: int) -> HTMLResponse:
    logger.info("Embed page error (%d): %s", status_code, message)
    return _render(request, {"error": message}, status_code=status_code)


def _form_view(form) -> dict:
    sections = []
    for s_index, section in enumerate(extract_sections({"structure": form.structure}), start=1):
        questions = [
            dict(question, key=question_key(s_index, q_index))
            for q_index, question in enumerate(section.get("questions") or [], start=1)
        ]
        sections.append({"title": section.get("title", ""), "questions": questions})
    return {"form": form, "sections": sections}


@router.get("/feedback/{event_id}/{user_type}/{user_id}", response_class=HTMLResponse)
def feedback_page(
    request: Request,
    event_id: str,
    user_type: str,
    user_id: str,
    gateway: Gateway = Depends(get_gateway),
):
    if user_type not in USER_TYPES:
        return _error(request, f"Invalid user type: {user_type}. Expected 'coach' or 'player'.", 400)

    try:
        event = gateway.get_by_id("events", event_id)
    except RecordNotFoundError:
        return _error(request, "Event not found", 404)

    try:
        user = gateway.get_by_id("users", user_id)
    except RecordNotFoundError:
        return _error(request, "User not found", 404)

    forms = gateway.list_by("forms", {"event_id": event.id}, order_by="created_at", descending=True)
    if user_type == "player":
        forms = [form for form in forms if form.status == "active"]

    return _render(
        request,
        {
            "event": event,
            "user": user,
            "user_type": user_type,
            "forms": [_form_view(form) for form in forms],
        },
    )
