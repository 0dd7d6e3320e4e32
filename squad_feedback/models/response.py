import uuid
from datetime import datetime

from sqlalchemy import Float, ForeignKey, Index, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from squad_feedback.core.database import Base


class Response(Base):
    """One respondent's submission against a form.

    ``user_id`` is always NULL for anonymous submissions. Rows are never
    updated once written.
    """

    __tablename__ = "responses"
    __table_args__ = (
        Index("ix_responses_form_id", "form_id"),
        Index("ix_responses_user_id", "user_id"),
        Index("ix_responses_form_user", "form_id", "user_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    form_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("forms.id"), nullable=False
    )
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id")
    )
    is_anonymous: Mapped[bool] = mapped_column(default=False, nullable=False)
    completion_time_seconds: Mapped[int | None] = mapped_column()
    submitted_at: Mapped[datetime] = mapped_column(server_default=func.now())

    form: Mapped["Form"] = relationship(back_populates="responses")
    user: Mapped["User"] = relationship(back_populates="responses")
    question_responses: Mapped[list["QuestionResponse"]] = relationship(
        back_populates="response", cascade="all, delete-orphan"
    )

    @property
    def answers(self) -> dict:
        return {qr.question_id: qr.answer for qr in self.question_responses}

    def __repr__(self) -> str:
        who = "anonymous" if self.is_anonymous else self.user_id
        return f"<Response form={self.form_id} ({who})>"


class QuestionResponse(Base):
    """A single typed answer; exactly one of the answer columns is set.

    ``question_id`` is the key the client used for the question, e.g.
    ``"s1q2"`` for the second question of the first section.
    """

    __tablename__ = "question_responses"
    __table_args__ = (
        Index("ix_question_responses_response_id", "response_id"),
        Index("ix_question_responses_question_id", "question_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    response_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("responses.id"), nullable=False
    )
    question_id: Mapped[str] = mapped_column(String(100), nullable=False)
    answer_text: Mapped[str | None] = mapped_column(Text)
    answer_numeric: Mapped[float | None] = mapped_column(Float)
    answer_choice: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    response: Mapped["Response"] = relationship(back_populates="question_responses")

    @property
    def answer(self):
        """The stored value, whichever column holds it."""
        if self.answer_numeric is not None:
            return self.answer_numeric
        if self.answer_choice is not None:
            return self.answer_choice
        return self.answer_text

    def __repr__(self) -> str:
        return f"<QuestionResponse {self.question_id}={self.answer!r}>"
