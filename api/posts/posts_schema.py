from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from config.points_config import PostType

class PostCreate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    content: str
    post_type: PostType = PostType.general

    model_config = ConfigDict(extra="forbid")

class PostRead(BaseModel):
    id: str
    user_id: int
    title: Optional[str] = None
    content: str
    post_type: PostType
    likes_count: int
    comments_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class PostCreated(BaseModel):
    post: PostRead
    points_awarded: int

class PostLikeResponse(BaseModel):
    post: PostRead
    liked_by_user: bool
    likes_count: int
    points_awarded: int = 0
