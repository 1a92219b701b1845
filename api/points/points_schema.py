from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from config.points_config import ActionType

class AwardResult(BaseModel):
    points_awarded: int = Field(0, ge=0)

class UserPointsResponse(BaseModel):
    user_id: int
    points: int
    updated_at: datetime
    rank: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

class UpdateUserPointsRequest(BaseModel):
    points: int = Field(
        ...,
        ge=0,
        description="New absolute balance; must be a non-negative integer"
    )

    model_config = ConfigDict(extra="forbid", strict=True)

class PointsLogEntry(BaseModel):
    id: int
    action_type: ActionType
    reference_id: str
    points_awarded: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class PointsLogPage(BaseModel):
    entries: List[PointsLogEntry]
    total: int
    limit: int
    offset: int

class LeaderboardEntry(BaseModel):
    user_id: int
    name: str
    points: int
    rank: int

    model_config = ConfigDict(from_attributes=True)

class LeaderboardResponse(BaseModel):
    users: List[LeaderboardEntry]
    total: int
    limit: int
    offset: int
