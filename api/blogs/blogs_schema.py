from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class BlogCreate(BaseModel):
    title: str = Field(..., max_length=255)
    content: str

    model_config = ConfigDict(extra="forbid")

class BlogRead(BaseModel):
    id: str
    user_id: int
    title: str
    content: str
    featured: bool
    likes_count: int
    comments_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class BlogCreated(BaseModel):
    blog: BlogRead
    points_awarded: int

class BlogLikeResponse(BaseModel):
    blog: BlogRead
    liked_by_user: bool
    likes_count: int
    points_awarded: int = 0

class FeatureBlogRequest(BaseModel):
    featured: bool

    model_config = ConfigDict(extra="forbid", strict=True)

class FeatureBlogResponse(BaseModel):
    blog: BlogRead
    points_awarded: int

class CommentCreate(BaseModel):
    content: str

    model_config = ConfigDict(extra="forbid")

class CommentRead(BaseModel):
    id: str
    user_id: int
    content: str
    created_at: datetime
    points_awarded: int = 0

    model_config = ConfigDict(from_attributes=True)
