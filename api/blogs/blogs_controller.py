# blogs_controller.py
from fastapi import Depends
from sqlalchemy.orm import Session
from typing import Any, Dict
from config.database import get_db
from middlewares.auth_middleware import auth_middleware
from api.blogs.blogs_schema import (
    BlogCreate,
    BlogRead,
    BlogCreated,
    BlogLikeResponse,
    FeatureBlogRequest,
    FeatureBlogResponse,
    CommentCreate,
    CommentRead,
)
from api.blogs.blogs_service import BlogService

service = BlogService

def create_blog(
    blog_in: BlogCreate,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> BlogCreated:
    blog, points = service(db).create_blog(blog_in, current_user["id"])
    return BlogCreated(blog=BlogRead.model_validate(blog), points_awarded=points)

def read_blog(
    blog_id: str,
    db: Session = Depends(get_db)
) -> BlogRead:
    return BlogRead.model_validate(service(db).get_blog_or_404(blog_id))

def like_blog(
    blog_id: str,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> BlogLikeResponse:
    blog, points = service(db).like_blog(blog_id, current_user["id"])
    return BlogLikeResponse(
        blog=BlogRead.model_validate(blog),
        liked_by_user=True,
        likes_count=blog.likes_count,
        points_awarded=points,
    )

def unlike_blog(
    blog_id: str,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> BlogLikeResponse:
    blog = service(db).unlike_blog(blog_id, current_user["id"])
    return BlogLikeResponse(
        blog=BlogRead.model_validate(blog),
        liked_by_user=False,
        likes_count=blog.likes_count,
    )

def feature_blog(
    blog_id: str,
    data: FeatureBlogRequest,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> FeatureBlogResponse:
    blog, points = service(db).set_featured(blog_id, data.featured, current_user["id"])
    return FeatureBlogResponse(blog=BlogRead.model_validate(blog), points_awarded=points)

def comment_on_blog(
    blog_id: str,
    data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> CommentRead:
    comment, points = service(db).add_comment(blog_id, data, current_user["id"])
    result = CommentRead.model_validate(comment)
    result.points_awarded = points
    return result
