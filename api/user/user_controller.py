from fastapi import Depends
from sqlalchemy.orm import Session
from config.database import get_db
from api.user.user_schema import UserCreate
from api.user.user_service import create_user, get_user_or_404
from api.user.user_model import User

# Controller functions for user operations

def register_user(
    req: UserCreate,
    db: Session = Depends(get_db)
) -> User:
    return create_user(db, req)

def get_profile(
    user_id: int,
    db: Session = Depends(get_db)
) -> User:
    return get_user_or_404(db, user_id)
