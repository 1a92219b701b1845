from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime

# ----- Registration Schema -----
class UserCreate(BaseModel):
    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Display name shown on the leaderboard"
    )
    email: EmailStr = Field(
        ...,
        description="A valid email address"
    )

    model_config = ConfigDict(extra="forbid")

# ----- Response Schema -----
class UserResponse(BaseModel):
    id: int
    name: str
    email: EmailStr
    role: str
    points: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
