import uuid
from datetime import datetime

from sqlalchemy import Enum, ForeignKey, Index, String, func
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from squad_feedback.core.database import Base
from squad_feedback.services.structure import count_sections, count_total_questions


class Form(Base):
    """An event-bound copy of a template's sections array.

    ``structure`` is copied from the template when the form is created and is
    never shared with it afterwards.
    """

    __tablename__ = "forms"
    __table_args__ = (
        Index("ix_forms_event_id", "event_id"),
        Index("ix_forms_status", "status"),
        Index("ix_forms_event_status", "event_id", "status"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    template_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("templates.id"), nullable=False
    )
    event_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("events.id"), nullable=False
    )
    structure: Mapped[list] = mapped_column(JSONB, nullable=False, default=list)
    status: Mapped[str] = mapped_column(
        Enum("draft", "active", "closed", name="form_status"),
        nullable=False,
        server_default="draft",
    )
    allow_anonymous: Mapped[bool] = mapped_column(
        default=True, server_default="true", nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    event: Mapped["Event"] = relationship(back_populates="forms")
    template: Mapped["Template"] = relationship(back_populates="forms")
    responses: Mapped[list["Response"]] = relationship(
        back_populates="form", cascade="all, delete-orphan"
    )

    @property
    def section_count(self) -> int:
        return count_sections({"structure": self.structure})

    @property
    def question_count(self) -> int:
        return count_total_questions({"structure": self.structure})

    def __repr__(self) -> str:
        return f"<Form {self.name} ({self.status})>"
