import jwt
import datetime
from typing import Any, Dict, Optional

from config.settings import settings  # must define SECRET_KEY and ALGORITHM
from api.user.user_model import User

def create_access_token(
    payload: Dict[str, Any],
    expires_minutes: Optional[int] = None,
) -> str:
    """
    Generate a JWT access token with the given payload and expiration.
    """
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(minutes=minutes)
    to_encode = payload.copy()
    to_encode.update({"exp": expire})

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_user_token(
    user: User,
    expires_minutes: Optional[int] = None
) -> str:
    """
    Generate a JWT for a User instance, embedding:
      - id
      - email
      - role
      - exp (handled by create_access_token)
    """
    token_payload: Dict[str, Any] = {
        "id":    user.id,
        "email": user.email,
        "role":  user.role,
    }
    return create_access_token(token_payload, expires_minutes)
