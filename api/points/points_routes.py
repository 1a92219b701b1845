from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from config.database import get_db
from config.settings import settings
from middlewares.auth_middleware import auth_middleware
from middlewares.role_middleware import require_admin
from api.points.points_controller import (
    read_user_points,
    update_user_points,
    read_points_log,
    read_leaderboard,
)
from api.points.points_schema import (
    UserPointsResponse,
    UpdateUserPointsRequest,
    PointsLogPage,
    LeaderboardResponse,
)
from utils.query_params import Pagination, pagination_params

router = APIRouter(tags=["Points"])

leaderboard_page = pagination_params(settings.LEADERBOARD_DEFAULT_LIMIT, settings.LEADERBOARD_MAX_LIMIT)
log_page = pagination_params(50, 200)

@router.get(
    "/users/{user_id}/points",
    response_model=UserPointsResponse,
    summary="Get a user's points and rank"
)
def get_points(
    user_id: int,
    db: Session = Depends(get_db)
):
    return read_user_points(user_id, db)

@router.patch(
    "/users/{user_id}/points",
    response_model=UserPointsResponse,
    summary="Set a user's points (admin only)",
    dependencies=[Depends(require_admin)]
)
def patch_points(
    user_id: int,
    data: UpdateUserPointsRequest,
    db: Session = Depends(get_db)
):
    return update_user_points(user_id, data, db)

@router.get(
    "/users/{user_id}/points/log",
    response_model=PointsLogPage,
    summary="List a user's point awards, newest first"
)
def get_points_log(
    user_id: int,
    page: Pagination = Depends(log_page),
    db: Session = Depends(get_db),
    current_user: dict = Depends(auth_middleware)
):
    return read_points_log(user_id, page, db, current_user)

@router.get(
    "/leaderboard",
    response_model=LeaderboardResponse,
    summary="Get users ranked by points"
)
def get_leaderboard(
    page: Pagination = Depends(leaderboard_page),
    db: Session = Depends(get_db)
):
    return read_leaderboard(page, db)
