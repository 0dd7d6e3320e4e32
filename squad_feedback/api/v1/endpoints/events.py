from fastapi import APIRouter, Depends

from squad_feedback.api.errors import guard
from squad_feedback.schemas.events import EventResponse
from squad_feedback.services.gateway import Gateway, get_gateway

router = APIRouter()


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: str, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to fetch event"):
        return gateway.get_by_id("events", event_id)
