# blogs_model.py
import uuid
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from config.database import Base

def _new_id() -> str:
    return str(uuid.uuid4())

class Blog(Base):
    __tablename__ = "blogs"

    id             = Column(String(36), primary_key=True, default=_new_id)
    user_id        = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title          = Column(String(255), nullable=False)
    content        = Column(Text, nullable=False)
    featured       = Column(Boolean, nullable=False, default=False)
    # set once the featuring bonus has been paid; never cleared by unfeaturing
    featured_bonus_awarded = Column(Boolean, nullable=False, default=False)
    likes_count    = Column(Integer, nullable=False, default=0)
    comments_count = Column(Integer, nullable=False, default=0)
    created_at     = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at     = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    likes = relationship("BlogLike", back_populates="blog", cascade="all, delete-orphan")
    comments = relationship("BlogComment", back_populates="blog", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Blog(id={self.id}, title='{self.title}')>"


class BlogLike(Base):
    __tablename__ = "blog_likes"
    __table_args__ = (
        UniqueConstraint("blog_id", "user_id", name="uq_blog_likes_blog_user"),
    )

    id         = Column(String(36), primary_key=True, default=_new_id)
    blog_id    = Column(String(36), ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id    = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    blog = relationship("Blog", back_populates="likes")


class BlogComment(Base):
    __tablename__ = "blog_comments"

    id         = Column(String(36), primary_key=True, default=_new_id)
    blog_id    = Column(String(36), ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id    = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    content    = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    blog = relationship("Blog", back_populates="comments")
