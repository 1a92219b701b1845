from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Any, Dict
from config.database import get_db
from middlewares.auth_middleware import auth_middleware
from middlewares.role_middleware import is_admin
from api.points.points_service import PointsService
from api.points.points_schema import (
    UserPointsResponse,
    UpdateUserPointsRequest,
    PointsLogPage,
    PointsLogEntry,
    LeaderboardResponse,
    LeaderboardEntry,
)
from api.user.user_service import get_user_or_404
from utils.query_params import Pagination

service = PointsService


def _points_response(svc: PointsService, user_id: int, balance) -> UserPointsResponse:
    return UserPointsResponse(
        user_id=balance.user_id,
        points=balance.points,
        updated_at=balance.updated_at,
        rank=svc.get_rank(user_id),
    )


def read_user_points(
    user_id: int,
    db: Session = Depends(get_db)
) -> UserPointsResponse:
    get_user_or_404(db, user_id)
    svc = service(db)
    balance = svc.get_or_create_balance(user_id)
    return _points_response(svc, user_id, balance)


def update_user_points(
    user_id: int,
    data: UpdateUserPointsRequest,
    db: Session = Depends(get_db)
) -> UserPointsResponse:
    """Admin override of a user's balance."""
    get_user_or_404(db, user_id)
    svc = service(db)
    balance = svc.set_balance(user_id, data.points)
    return _points_response(svc, user_id, balance)


def read_points_log(
    user_id: int,
    page: Pagination,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(auth_middleware)
) -> PointsLogPage:
    if current_user["id"] != user_id and not is_admin(current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only view your own points history"
        )
    get_user_or_404(db, user_id)
    svc = service(db)
    entries = svc.get_log(user_id, page.limit, page.offset)
    return PointsLogPage(
        entries=[PointsLogEntry.model_validate(e) for e in entries],
        total=svc.count_log(user_id),
        limit=page.limit,
        offset=page.offset,
    )


def read_leaderboard(
    page: Pagination,
    db: Session = Depends(get_db)
) -> LeaderboardResponse:
    users, total = service(db).get_leaderboard(page.limit, page.offset)
    return LeaderboardResponse(
        users=[LeaderboardEntry.model_validate(u) for u in users],
        total=total,
        limit=page.limit,
        offset=page.offset,
    )
