import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

EventType = Literal["match", "training"]


class EventSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    type: EventType
    date: datetime


class EventResponse(EventSummary):
    opponent: str | None
    club: str
    location: str | None
    created_at: datetime
    updated_at: datetime
