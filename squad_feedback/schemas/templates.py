import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Structure schemas
# ---------------------------------------------------------------------------


class Question(BaseModel):
    """Single question in a template section.

    ``type`` and ``text`` are deliberately loose here; the structure
    validator reports bad values as a list of errors instead.
    """

    type: str
    text: str = ""
    scale: int | None = Field(None, gt=0, description="Upper bound of the rating scale")
    options: list[str] | None = Field(None, description="Choices for multiple_choice questions")
    required: bool = True


class Section(BaseModel):
    title: str = ""
    questions: list[Question] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Template schemas
# ---------------------------------------------------------------------------


class TemplateCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    type: str = Field(..., min_length=1, max_length=50)
    estimated_time: str | None = Field(None, max_length=50)
    icon: str | None = Field(None, max_length=16)
    sections: list[Section] = Field(default_factory=list)


class TemplateSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    type: str


class TemplateBrief(TemplateSummary):
    description: str | None


class TemplateResponse(TemplateBrief):
    estimated_time: str | None
    icon: str | None
    structure: list[dict[str, Any]]
    section_count: int
    question_count: int
    created_at: datetime
    updated_at: datetime


class TemplateDetailResponse(TemplateResponse):
    sections: list[dict[str, Any]]


class CatalogTemplateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    type: str
    estimated_time: str
    icon: str
    declared_sections: int
    declared_questions: int
    section_count: int
    question_count: int
    structure: list[dict[str, Any]]
