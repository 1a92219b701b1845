from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from config.database import get_db
from middlewares.auth_middleware import auth_middleware
from api.posts.posts_controller import create_post, read_post, like_post, comment_on_post
from api.posts.posts_schema import PostCreate, PostRead, PostCreated, PostLikeResponse
from api.blogs.blogs_schema import CommentCreate, CommentRead

router = APIRouter(prefix="/posts", tags=["Forum"])

@router.post(
    "",
    response_model=PostCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a forum post"
)
def post_create(
    post_in: PostCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(auth_middleware)
):
    return create_post(post_in, db, current_user)

@router.get("/{post_id}", response_model=PostRead)
def get_post(
    post_id: str,
    db: Session = Depends(get_db)
):
    return read_post(post_id, db)

@router.post(
    "/{post_id}/like",
    response_model=PostLikeResponse,
    summary="Like a post; the author earns points"
)
def post_like(
    post_id: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(auth_middleware)
):
    return like_post(post_id, db, current_user)

@router.post(
    "/{post_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post"
)
def post_comment(
    post_id: str,
    data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(auth_middleware)
):
    return comment_on_post(post_id, data, db, current_user)
