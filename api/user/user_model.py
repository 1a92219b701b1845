# api/user/user_model.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from config.database import Base
from api.user.user_points_model import UserPoints, PointActionLog
from api.roles.roles_model import UserRole

class User(Base):
    __tablename__ = 'users'

    id          = Column(Integer, primary_key=True, index=True)
    name        = Column(String(100), nullable=False)
    email       = Column(String(255), nullable=False, unique=True, index=True)
    created_at  = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at  = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # running total for the leaderboard, created lazily on first award
    points_balance = relationship(
        UserPoints,
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan"
    )

    points_log = relationship(
        PointActionLog,
        back_populates="user",
        cascade="all, delete-orphan"
    )

    role_assignment = relationship(
        UserRole,
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan"
    )

    @property
    def role(self) -> str:
        return self.role_assignment.role if self.role_assignment else UserRole.DEFAULT_ROLE

    @property
    def points(self) -> int:
        return self.points_balance.points if self.points_balance else 0

    def __repr__(self):
        return f"<User(id={self.id}, name='{self.name}', points={self.points})>"
