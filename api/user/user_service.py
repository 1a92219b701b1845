from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError
from api.user.user_model import User
from api.user.user_schema import UserCreate
from api.roles.roles_model import UserRole


def create_user(db: Session, data: UserCreate, role: str = UserRole.DEFAULT_ROLE) -> User:
    """
    Create a new user with its role assignment in one transaction.
    Points balances are not created here; the points engine makes them lazily.
    """
    try:
        new_user = User(name=data.name.strip(), email=data.email.lower())
        db.add(new_user)
        # Make sure SQLAlchemy assigns us an ID
        db.flush()
        db.add(UserRole(user_id=new_user.id, role=role))
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already exists."
        )
    db.refresh(new_user)
    return new_user


def get_user(db: Session, user_id: int) -> Optional[User]:
    return (
        db.query(User)
        .options(
            joinedload(User.role_assignment),
            joinedload(User.points_balance)
        )
        .filter(User.id == user_id)
        .first()
    )


def get_user_or_404(db: Session, user_id: int) -> User:
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user
