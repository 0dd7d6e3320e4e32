"""Form API: creation from templates, lifecycle updates, responses and analytics."""

import copy
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query

from squad_feedback.api.errors import guard
from squad_feedback.core.exceptions import (
    InvalidRequestError,
    RecordNotFoundError,
    ResourceNotFoundError,
    StructureValidationError,
)
from squad_feedback.models import Form
from squad_feedback.schemas.forms import (
    FormAnalytics,
    FormCreate,
    FormDetailResponse,
    FormListItem,
    FormResponse,
    FormUpdate,
)
from squad_feedback.schemas.responses import ResponseSchema
from squad_feedback.services.analytics import summarize_form_responses
from squad_feedback.services.gateway import Gateway, get_gateway
from squad_feedback.services.structure import extract_sections, validate_form_structure

logger = logging.getLogger(__name__)

router = APIRouter()

# Allowed status moves; staying in the same status is always allowed
STATUS_TRANSITIONS = {
    "draft": {"active", "closed"},
    "active": {"closed"},
    "closed": set(),
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_form_or_404(form_id: str, gateway: Gateway) -> Form:
    try:
        return gateway.get_by_id("forms", form_id)
    except RecordNotFoundError:
        raise ResourceNotFoundError("Form not found") from None


def _default_form_name(template_name: str, today: datetime | None = None) -> str:
    today = today or datetime.now()
    return f"{template_name} - {today.month}/{today.day}/{today.year}"


def _check_structure(structure) -> list:
    """Validate ``structure`` and return it as a plain sections list."""
    result = validate_form_structure({"structure": structure})
    if not result.is_valid:
        raise StructureValidationError(result.errors)
    return extract_sections({"structure": structure})


def _check_transition(current: str, new: str) -> None:
    if new != current and new not in STATUS_TRANSITIONS.get(current, set()):
        raise InvalidRequestError(f"Cannot change form status from {current} to {new}")


# ---------------------------------------------------------------------------
# Form CRUD
# ---------------------------------------------------------------------------


@router.get("/", response_model=list[FormListItem])
def list_forms(
    event_id: str | None = Query(None),
    gateway: Gateway = Depends(get_gateway),
):
    with guard("Failed to fetch forms"):
        filters = {"event_id": event_id} if event_id else None
        return gateway.list_by("forms", filters, order_by="created_at", descending=True)


@router.get("/{form_id}", response_model=FormDetailResponse)
def get_form(form_id: str, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to fetch form"):
        return gateway.get_by_id("forms", form_id)


@router.post("/", response_model=FormResponse)
def create_form(payload: FormCreate, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to create form"):
        try:
            template = gateway.get_by_id("templates", payload.template_id)
        except RecordNotFoundError:
            raise ResourceNotFoundError("Template not found") from None

        try:
            event = gateway.get_by_id("events", payload.event_id)
        except RecordNotFoundError:
            raise ResourceNotFoundError("Event not found") from None

        values = {
            "name": _default_form_name(template.name),
            "template_id": template.id,
            "event_id": event.id,
            "structure": copy.deepcopy(template.structure),
            "status": "active",
            "allow_anonymous": True,
            **(payload.customizations or {}),
        }
        if values["status"] not in STATUS_TRANSITIONS:
            raise InvalidRequestError(f"Invalid form status: {values['status']}")
        values["structure"] = _check_structure(values["structure"])

        form = gateway.insert("forms", values)
        logger.info("Created form %s from template %s for event %s", form.id, template.id, event.id)
        return form


@router.patch("/{form_id}", response_model=FormResponse)
def update_form(
    form_id: str,
    payload: FormUpdate,
    gateway: Gateway = Depends(get_gateway),
):
    with guard("Failed to update form"):
        form = _get_form_or_404(form_id, gateway)

        update_data = payload.model_dump(exclude_unset=True)
        if not update_data:
            raise InvalidRequestError("No fields to update")

        if update_data.get("status") is not None:
            _check_transition(form.status, update_data["status"])
        if "structure" in update_data:
            if form.status != "draft":
                raise InvalidRequestError("Only draft forms can change their structure")
            _check_structure(update_data["structure"])
        if update_data.get("status") == "active":
            _check_structure(update_data.get("structure", form.structure))

        update_data = {k: v for k, v in update_data.items() if v is not None}
        return gateway.update("forms", form.id, update_data)


# ---------------------------------------------------------------------------
# Responses and analytics
# ---------------------------------------------------------------------------


@router.get("/{form_id}/responses", response_model=list[ResponseSchema])
def list_form_responses(form_id: str, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to get responses"):
        form = _get_form_or_404(form_id, gateway)
        return gateway.list_by("responses", {"form_id": form.id}, order_by="submitted_at", descending=True)


@router.get("/{form_id}/analytics", response_model=FormAnalytics)
def get_form_analytics(form_id: str, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to get analytics"):
        form = _get_form_or_404(form_id, gateway)
        responses = gateway.list_by("responses", {"form_id": form.id})
        return summarize_form_responses(form, responses)
