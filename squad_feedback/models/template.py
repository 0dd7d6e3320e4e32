import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from squad_feedback.core.database import Base
from squad_feedback.services.structure import count_sections, count_total_questions


class Template(Base):
    """Reusable feedback form blueprint.

    ``structure`` holds the sections array:
        [
            {
                "title": "Performance Assessment",
                "questions": [
                    {"type": "rating", "text": "...", "scale": 10},
                    {"type": "multiple_choice", "text": "...", "options": ["A", "B"]},
                ],
            },
        ]

    Coach-authored templates are also written to ``template_sections`` and
    ``template_questions``.
    """

    __tablename__ = "templates"
    __table_args__ = (Index("ix_templates_type", "type"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    estimated_time: Mapped[str | None] = mapped_column(String(50))
    icon: Mapped[str | None] = mapped_column(String(16))
    structure: Mapped[list] = mapped_column(JSONB, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    sections: Mapped[list["TemplateSection"]] = relationship(
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="TemplateSection.order_index",
    )
    forms: Mapped[list["Form"]] = relationship(back_populates="template")

    @property
    def section_count(self) -> int:
        return count_sections({"structure": self.structure})

    @property
    def question_count(self) -> int:
        return count_total_questions({"structure": self.structure})

    def __repr__(self) -> str:
        return f"<Template {self.name} ({self.type})>"


class TemplateSection(Base):
    __tablename__ = "template_sections"
    __table_args__ = (
        Index("ix_template_sections_template_order", "template_id", "order_index"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    template_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("templates.id"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    template: Mapped["Template"] = relationship(back_populates="sections")
    questions: Mapped[list["TemplateQuestion"]] = relationship(
        back_populates="section",
        cascade="all, delete-orphan",
        order_by="TemplateQuestion.order_index",
    )

    def __repr__(self) -> str:
        return f"<TemplateSection {self.order_index}: {self.title}>"


class TemplateQuestion(Base):
    __tablename__ = "template_questions"
    __table_args__ = (
        Index("ix_template_questions_section_order", "section_id", "order_index"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    section_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("template_sections.id"), nullable=False
    )
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_type: Mapped[str] = mapped_column(String(20), nullable=False)
    options: Mapped[list | None] = mapped_column(JSONB)
    scale: Mapped[int | None] = mapped_column(Integer)
    required: Mapped[bool] = mapped_column(default=True, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    section: Mapped["TemplateSection"] = relationship(back_populates="questions")

    def __repr__(self) -> str:
        return f"<TemplateQuestion {self.order_index} ({self.question_type})>"
