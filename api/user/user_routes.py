from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from config.database import get_db
from api.user.user_controller import register_user, get_profile
from api.user.user_schema import UserCreate, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])

@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED
)
def register(
    req: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Create a member account.
    """
    return register_user(req, db)

@router.get("/{user_id}", response_model=UserResponse)
def read_user(
    user_id: int,
    db: Session = Depends(get_db)
):
    return get_profile(user_id, db)
