import uuid
from datetime import datetime

from sqlalchemy import Enum, Index, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from squad_feedback.core.database import Base


class Event(Base):
    """A match or training session that feedback forms are scoped to."""

    __tablename__ = "events"
    __table_args__ = (Index("ix_events_club_date", "club", "date"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(
        Enum("match", "training", name="event_type"), nullable=False
    )
    opponent: Mapped[str | None] = mapped_column(String(255))
    date: Mapped[datetime] = mapped_column(nullable=False)
    club: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    forms: Mapped[list["Form"]] = relationship(back_populates="event")

    def __repr__(self) -> str:
        return f"<Event {self.name} ({self.type})>"
