# blogs_routes.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from config.database import get_db
from middlewares.auth_middleware import auth_middleware
from middlewares.role_middleware import require_admin
from api.blogs.blogs_controller import (
    create_blog,
    read_blog,
    like_blog,
    unlike_blog,
    feature_blog,
    comment_on_blog,
)
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

router = APIRouter(prefix="/blogs", tags=["Blogs"])

@router.post(
    "",
    response_model=BlogCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a blog and award the author"
)
def post_blog(
    blog_in: BlogCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(auth_middleware)
):
    return create_blog(blog_in, db, current_user)

@router.get(
    "/{blog_id}",
    response_model=BlogRead,
    summary="Get a blog"
)
def get_blog(
    blog_id: str,
    db: Session = Depends(get_db)
):
    return read_blog(blog_id, db)

@router.post(
    "/{blog_id}/like",
    response_model=BlogLikeResponse,
    summary="Like a blog; the author earns points"
)
def post_like(
    blog_id: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(auth_middleware)
):
    return like_blog(blog_id, db, current_user)

@router.delete(
    "/{blog_id}/like",
    response_model=BlogLikeResponse,
    summary="Remove a like"
)
def delete_like(
    blog_id: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(auth_middleware)
):
    return unlike_blog(blog_id, db, current_user)

@router.patch(
    "/{blog_id}/feature",
    response_model=FeatureBlogResponse,
    summary="Feature or unfeature a blog (admin only)"
)
def patch_feature(
    blog_id: str,
    data: FeatureBlogRequest,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    return feature_blog(blog_id, data, db, current_user)

@router.post(
    "/{blog_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a blog"
)
def post_comment(
    blog_id: str,
    data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(auth_middleware)
):
    return comment_on_blog(blog_id, data, db, current_user)
