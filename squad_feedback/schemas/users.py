import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

UserRole = Literal["coach", "player"]


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    role: UserRole
    position: str | None


class UserResponse(UserSummary):
    club: str
    age: int | None
    jersey_number: int | None
    created_at: datetime
    updated_at: datetime
