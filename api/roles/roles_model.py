from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from config.database import Base

class UserRole(Base):
    __tablename__ = "user_roles"
    __table_args__ = (
        CheckConstraint("role IN ('member', 'admin')", name="ck_user_roles_role"),
    )

    ADMIN = "admin"
    MEMBER = "member"
    DEFAULT_ROLE = MEMBER

    id         = Column(Integer, primary_key=True, index=True)
    user_id    = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    role       = Column(String(20), nullable=False, default=DEFAULT_ROLE)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="role_assignment")

    def __repr__(self):
        return f"<UserRole(user_id={self.user_id}, role='{self.role}')>"
