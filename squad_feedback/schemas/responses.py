import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from squad_feedback.schemas.users import UserSummary


class ResponseSubmission(BaseModel):
    """Answers to a form from one respondent."""

    form_id: uuid.UUID
    user_id: uuid.UUID | None = None
    responses: dict[str, Any] = Field(
        ...,
        description="Map of question key (e.g. s1q2) to answer value",
    )
    is_anonymous: bool = False
    completion_time_seconds: int | None = Field(None, ge=0)


class ResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    form_id: uuid.UUID
    user_id: uuid.UUID | None
    is_anonymous: bool
    completion_time_seconds: int | None
    submitted_at: datetime
    answers: dict[str, Any]


class ResponseWithUser(ResponseSchema):
    user: UserSummary | None
