import uuid
from datetime import datetime

from sqlalchemy import Enum, Index, Integer, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from squad_feedback.core.database import Base


class User(Base):
    """A coach or player belonging to a club."""

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_club_role", "club", "role"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        Enum("coach", "player", name="user_role"), nullable=False
    )
    club: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str | None] = mapped_column(String(100))
    age: Mapped[int | None] = mapped_column(Integer)
    jersey_number: Mapped[int | None] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    responses: Mapped[list["Response"]] = relationship(back_populates="user")

    def __repr__(self) -> str:
        return f"<User {self.name} ({self.role})>"
