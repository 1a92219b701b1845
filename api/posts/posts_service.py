from typing import Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from api.posts.posts_model import Post, PostLike, PostComment
from api.posts.posts_schema import PostCreate
from api.blogs.blogs_schema import CommentCreate
from api.points.points_service import PointsService
from config.points_config import ActionType, PostType, POST_TYPE_POINTS


class PostService:
    def __init__(self, db: Session):
        self.db = db
        self.points = PointsService(db)

    def get_post(self, post_id: str) -> Optional[Post]:
        return self.db.query(Post).filter(Post.id == post_id).first()

    def get_post_or_404(self, post_id: str) -> Post:
        post = self.get_post(post_id)
        if not post:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
        return post

    def create_post(self, data: PostCreate, author_id: int, is_admin: bool = False) -> Tuple[Post, int]:
        """
        Create a forum post. Discussions earn more than general posts;
        announcements are admin only and earn nothing.
        """
        content = (data.content or "").strip()
        if not content:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content is required")
        if data.post_type == PostType.announcement and not is_admin:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Only admins can create announcements"
            )

        post = Post(
            user_id=author_id,
            title=data.title.strip() if data.title else None,
            content=content,
            post_type=data.post_type.value,
        )
        self.db.add(post)
        self.db.flush()

        base_points = POST_TYPE_POINTS[data.post_type]
        points_awarded = 0
        if base_points > 0:
            result = self.points.award(
                author_id,
                ActionType.post_created,
                post.id,
                base_points=base_points,
            )
            points_awarded = result.points_awarded
        else:
            self.db.commit()

        self.db.refresh(post)
        return post, points_awarded

    def like_post(self, post_id: str, user_id: int) -> Tuple[Post, int]:
        post = self.get_post_or_404(post_id)
        if self.db.query(PostLike).filter_by(post_id=post_id, user_id=user_id).first():
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You already liked this post")

        like = PostLike(post_id=post_id, user_id=user_id)
        self.db.add(like)
        post.likes_count += 1
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You already liked this post")

        result = self.points.award(post.user_id, ActionType.like_received, like.id, actor_id=user_id)
        self.db.refresh(post)
        return post, result.points_awarded

    def add_comment(self, post_id: str, data: CommentCreate, user_id: int) -> Tuple[PostComment, int]:
        post = self.get_post_or_404(post_id)
        content = (data.content or "").strip()
        if not content:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content is required")

        comment = PostComment(post_id=post_id, user_id=user_id, content=content)
        self.db.add(comment)
        post.comments_count += 1
        self.db.flush()

        created = self.points.award(user_id, ActionType.comment_created, comment.id)
        self.points.award(post.user_id, ActionType.comment_received, comment.id, actor_id=user_id)
        self.db.refresh(comment)
        return comment, created.points_awarded
