"""Response API: submission and listing across forms."""

import uuid

from fastapi import APIRouter, Depends, Query

from squad_feedback.api.errors import guard
from squad_feedback.schemas.responses import ResponseSchema, ResponseSubmission, ResponseWithUser
from squad_feedback.services.gateway import Gateway, get_gateway
from squad_feedback.services.responses import submit_response

router = APIRouter()


@router.get("/", response_model=list[ResponseWithUser])
def list_responses(
    form_id: uuid.UUID | None = Query(None),
    user_id: uuid.UUID | None = Query(None),
    gateway: Gateway = Depends(get_gateway),
):
    with guard("Failed to fetch responses"):
        filters = {}
        if form_id is not None:
            filters["form_id"] = form_id
        if user_id is not None:
            filters["user_id"] = user_id
        return gateway.list_by("responses", filters, order_by="submitted_at", descending=True)


@router.post("/", response_model=ResponseSchema, status_code=201)
def create_response(payload: ResponseSubmission, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to submit response"):
        return submit_response(
            gateway,
            form_id=payload.form_id,
            answers=payload.responses,
            user_id=payload.user_id,
            is_anonymous=payload.is_anonymous,
            completion_time_seconds=payload.completion_time_seconds,
        )
