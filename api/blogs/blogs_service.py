import logging
from typing import Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from api.blogs.blogs_model import Blog, BlogLike, BlogComment
from api.blogs.blogs_schema import BlogCreate, CommentCreate
from api.points.points_service import PointsService
from config.points_config import ActionType

logger = logging.getLogger(__name__)


def _require_text(value: str, field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} is required"
        )
    return value


class BlogService:
    def __init__(self, db: Session):
        self.db = db
        self.points = PointsService(db)

    def get_blog(self, blog_id: str) -> Optional[Blog]:
        return self.db.query(Blog).filter(Blog.id == blog_id).first()

    def get_blog_or_404(self, blog_id: str) -> Blog:
        blog = self.get_blog(blog_id)
        if not blog:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")
        return blog

    def create_blog(self, data: BlogCreate, author_id: int) -> Tuple[Blog, int]:
        """
        Create the blog and award the author in the same transaction.
        """
        blog = Blog(
            user_id=author_id,
            title=_require_text(data.title, "Title"),
            content=_require_text(data.content, "Content"),
        )
        self.db.add(blog)
        self.db.flush()  # populates blog.id

        result = self.points.award(author_id, ActionType.blog_created, blog.id)
        self.db.refresh(blog)
        return blog, result.points_awarded

    def like_blog(self, blog_id: str, user_id: int) -> Tuple[Blog, int]:
        blog = self.get_blog_or_404(blog_id)
        existing = (
            self.db.query(BlogLike)
            .filter_by(blog_id=blog_id, user_id=user_id)
            .first()
        )
        if existing:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You already liked this blog")

        like = BlogLike(blog_id=blog_id, user_id=user_id)
        self.db.add(like)
        blog.likes_count += 1
        try:
            self.db.flush()
        except IntegrityError:
            # concurrent duplicate like
            self.db.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You already liked this blog")

        # the author earns the points, a self-like is logged at zero
        result = self.points.award(
            blog.user_id,
            ActionType.like_received,
            like.id,
            actor_id=user_id,
        )
        self.db.refresh(blog)
        return blog, result.points_awarded

    def unlike_blog(self, blog_id: str, user_id: int) -> Blog:
        """Remove a like. Points already awarded are kept."""
        blog = self.get_blog_or_404(blog_id)
        like = (
            self.db.query(BlogLike)
            .filter_by(blog_id=blog_id, user_id=user_id)
            .first()
        )
        if not like:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="You have not liked this blog")
        self.db.delete(like)
        blog.likes_count = max(blog.likes_count - 1, 0)
        self.db.commit()
        self.db.refresh(blog)
        return blog

    def has_liked(self, blog_id: str, user_id: int) -> bool:
        return (
            self.db.query(BlogLike)
            .filter_by(blog_id=blog_id, user_id=user_id)
            .first()
            is not None
        )

    def set_featured(self, blog_id: str, featured: bool, admin_id: int) -> Tuple[Blog, int]:
        """
        Feature or unfeature a blog. The author's bonus is paid only on the
        first transition to featured; repeats and re-features return 0.
        """
        blog = self.get_blog_or_404(blog_id)
        blog.featured = featured

        points_awarded = 0
        if featured and self._claim_feature_bonus(blog_id):
            result = self.points.award(
                blog.user_id,
                ActionType.blog_featured,
                blog.id,
                actor_id=admin_id,
            )
            points_awarded = result.points_awarded
        else:
            self.db.commit()
            logger.info("blog %s featured=%s, no bonus due", blog.id, featured)

        self.db.refresh(blog)
        return blog, points_awarded

    def _claim_feature_bonus(self, blog_id: str) -> bool:
        """Flip featured_bonus_awarded in a single conditional UPDATE; only one caller wins."""
        result = self.db.execute(
            update(Blog)
            .where(Blog.id == blog_id, Blog.featured_bonus_awarded.is_(False))
            .values(featured_bonus_awarded=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def add_comment(self, blog_id: str, data: CommentCreate, user_id: int) -> Tuple[BlogComment, int]:
        blog = self.get_blog_or_404(blog_id)
        comment = BlogComment(
            blog_id=blog_id,
            user_id=user_id,
            content=_require_text(data.content, "Content"),
        )
        self.db.add(comment)
        blog.comments_count += 1
        self.db.flush()

        created = self.points.award(user_id, ActionType.comment_created, comment.id)
        self.points.award(
            blog.user_id,
            ActionType.comment_received,
            comment.id,
            actor_id=user_id,
        )
        self.db.refresh(comment)
        return comment, created.points_awarded
