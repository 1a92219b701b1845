from fastapi import Depends
from sqlalchemy.orm import Session
from typing import Any, Dict
from config.database import get_db
from middlewares.auth_middleware import auth_middleware
from middlewares.role_middleware import is_admin
from api.posts.posts_schema import PostCreate, PostRead, PostCreated, PostLikeResponse
from api.blogs.blogs_schema import CommentCreate, CommentRead
from api.posts.posts_service import PostService

service = PostService

def create_post(
    post_in: PostCreate,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> PostCreated:
    post, points = service(db).create_post(post_in, current_user["id"], is_admin(current_user))
    return PostCreated(post=PostRead.model_validate(post), points_awarded=points)

def read_post(
    post_id: str,
    db: Session = Depends(get_db)
) -> PostRead:
    return PostRead.model_validate(service(db).get_post_or_404(post_id))

def like_post(
    post_id: str,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> PostLikeResponse:
    post, points = service(db).like_post(post_id, current_user["id"])
    return PostLikeResponse(
        post=PostRead.model_validate(post),
        liked_by_user=True,
        likes_count=post.likes_count,
        points_awarded=points,
    )

def comment_on_post(
    post_id: str,
    data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> CommentRead:
    comment, points = service(db).add_comment(post_id, data, current_user["id"])
    result = CommentRead.model_validate(comment)
    result.points_awarded = points
    return result
