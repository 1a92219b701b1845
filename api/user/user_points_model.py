from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from config.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserPoints(Base):
    __tablename__ = "user_points"
    __table_args__ = (
        CheckConstraint("points >= 0", name="ck_user_points_non_negative"),
    )

    id         = Column(Integer, primary_key=True, autoincrement=True)
    user_id    = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    points     = Column(Integer, nullable=False, default=0, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="points_balance")

    def __repr__(self):
        return f"<UserPoints(user_id={self.user_id}, points={self.points})>"


class PointActionLog(Base):
    """Append-only record of every award attempt, zero-point ones included."""
    __tablename__ = "point_actions_log"
    __table_args__ = (
        Index("idx_point_actions_user_time", "user_id", "action_type", "created_at"),
    )

    id             = Column(Integer, primary_key=True, autoincrement=True)
    user_id        = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    action_type    = Column(String(50), nullable=False)
    # polymorphic: blog, post, like or comment id
    reference_id   = Column(String(64), nullable=False)
    points_awarded = Column(Integer, nullable=False)
    created_at     = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    user = relationship("User", back_populates="points_log")
