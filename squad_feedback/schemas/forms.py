import uuid
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from squad_feedback.schemas.events import EventResponse, EventSummary
from squad_feedback.schemas.templates import TemplateBrief, TemplateSummary

FormStatus = Literal["draft", "active", "closed"]


# ---------------------------------------------------------------------------
# Form schemas
# ---------------------------------------------------------------------------


class FormCreate(BaseModel):
    """Create a form from a stored template for an event."""

    template_id: str
    event_id: str
    customizations: dict[str, Any] | None = Field(
        None,
        description="Column overrides applied on top of the defaults (name, status, allow_anonymous, structure)",
    )


class FormUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    status: FormStatus | None = None
    allow_anonymous: bool | None = None
    structure: list[dict[str, Any]] | None = None


class FormResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    template_id: uuid.UUID
    event_id: uuid.UUID
    structure: list[dict[str, Any]]
    status: FormStatus
    allow_anonymous: bool
    section_count: int
    question_count: int
    created_at: datetime
    updated_at: datetime


class FormListItem(FormResponse):
    event: EventSummary | None
    template: TemplateSummary | None


class FormDetailResponse(FormResponse):
    event: EventResponse | None
    template: TemplateBrief | None


# ---------------------------------------------------------------------------
# Analytics schemas
# ---------------------------------------------------------------------------


class QuestionAnalysis(BaseModel):
    questionId: str
    question: str
    avgRating: float | None
    responseCount: int


class FormAnalytics(BaseModel):
    formId: str
    formName: str
    totalResponses: int
    anonymousResponses: int
    responseRate: int
    averageCompletionTime: int
    sectionCount: int
    questionCount: int
    questionAnalysis: list[QuestionAnalysis]
