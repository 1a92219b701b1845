"""
Points award engine and leaderboard queries.

Every award is a count-then-write against the point_actions_log table:
prior entries for (user, action type) pick the diminishing-returns tier,
the balance row is bumped and a log entry is appended. Both writes, plus
anything the caller already staged on the session (the blog or like that
triggered the award), are committed together.
"""
import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple, Union

from sqlalchemy import case, func, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from api.points.points_schema import AwardResult
from api.user.user_model import User
from api.user.user_points_model import UserPoints, PointActionLog
from config.points_config import ActionType, POINT_VALUES, INITIAL_POINTS, tiered_points
from config.settings import settings

logger = logging.getLogger(__name__)

_LOCK_STRIPES = 64
_award_locks: List[threading.Lock] = [threading.Lock() for _ in range(_LOCK_STRIPES)]


def _lock_for(user_id: int, action_type: ActionType) -> threading.Lock:
    return _award_locks[hash((user_id, action_type.value)) % _LOCK_STRIPES]


@contextmanager
def _serialized(user_id: int, action_type: ActionType):
    """Hold the (user, action type) stripe lock from the window count through commit."""
    if not settings.POINTS_SERIALIZE_AWARDS:
        yield
        return
    with _lock_for(user_id, action_type):
        yield


class PointsService:
    def __init__(self, db: Session):
        self.db = db

    # ─── Award engine ───────────────────────────────────────────────────────────

    def award(
        self,
        user_id: int,
        action_type: Union[ActionType, str],
        reference_id: str,
        actor_id: Optional[int] = None,
        base_points: Optional[int] = None,
    ) -> AwardResult:
        """
        Award points to `user_id` for `action_type`, triggered by `reference_id`.

        `actor_id` is whoever performed the triggering action; when it equals
        the recipient nothing is credited but the attempt is still logged.
        Entity-state guards (e.g. a blog already featured) belong to the caller.
        Commits the session; storage errors roll back and propagate.
        """
        action_type = ActionType(action_type)
        base = POINT_VALUES[action_type] if base_points is None else base_points
        reference_id = str(reference_id)

        try:
            with _serialized(user_id, action_type):
                if actor_id is not None and actor_id == user_id:
                    prior_count = None
                    points = 0
                else:
                    prior_count = self.count_actions(user_id, action_type)
                    points = tiered_points(action_type, base, prior_count)
                    if points > 0:
                        self._credit(user_id, points)

                self.db.add(PointActionLog(
                    user_id=user_id,
                    action_type=action_type.value,
                    reference_id=reference_id,
                    points_awarded=points,
                ))
                self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(
                "award failed: user=%s action=%s reference=%s",
                user_id, action_type.value, reference_id
            )
            raise

        if prior_count is None:
            logger.info(
                "self-award suppressed: user=%s action=%s reference=%s",
                user_id, action_type.value, reference_id
            )
        else:
            logger.info(
                "awarded %d points: user=%s action=%s reference=%s prior=%d",
                points, user_id, action_type.value, reference_id, prior_count
            )
        return AwardResult(points_awarded=points)

    def count_actions(self, user_id: int, action_type: ActionType) -> int:
        """Prior log entries of this type inside the window, zero-point ones included."""
        query = (
            self.db.query(func.count(PointActionLog.id))
            .filter(
                PointActionLog.user_id == user_id,
                PointActionLog.action_type == ActionType(action_type).value,
            )
        )
        if settings.POINTS_WINDOW_SECONDS:
            window_start = datetime.now(timezone.utc) - timedelta(seconds=settings.POINTS_WINDOW_SECONDS)
            query = query.filter(PointActionLog.created_at >= window_start)
        return query.scalar() or 0

    def _credit(self, user_id: int, delta: int) -> None:
        """
        Increment the balance inside the database so concurrent awards of any
        action type for the same user never overwrite each other.
        """
        if self._increment(user_id, delta):
            return
        try:
            with self.db.begin_nested():
                self.db.add(UserPoints(
                    user_id=user_id,
                    points=min(INITIAL_POINTS + delta, settings.POINTS_MAX),
                    updated_at=datetime.now(timezone.utc),
                ))
        except IntegrityError:
            # row created by a concurrent award
            if not self._increment(user_id, delta):
                raise

    def _increment(self, user_id: int, delta: int) -> bool:
        new_total = UserPoints.points + delta
        result = self.db.execute(
            update(UserPoints)
            .where(UserPoints.user_id == user_id)
            .values(
                points=case((new_total > settings.POINTS_MAX, settings.POINTS_MAX), else_=new_total),
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    # ─── Balances ───────────────────────────────────────────────────────────────

    def get_or_create_balance(self, user_id: int) -> UserPoints:
        balance = self.db.query(UserPoints).filter(UserPoints.user_id == user_id).one_or_none()
        if balance is None:
            balance = UserPoints(user_id=user_id, points=INITIAL_POINTS)
            self.db.add(balance)
            self.db.commit()
            self.db.refresh(balance)
        return balance

    def set_balance(self, user_id: int, points: int) -> UserPoints:
        """Manual adjustment; bypasses the engine and writes no log entry."""
        balance = self.db.query(UserPoints).filter(UserPoints.user_id == user_id).one_or_none()
        if balance is None:
            balance = UserPoints(user_id=user_id)
            self.db.add(balance)
        balance.points = min(points, settings.POINTS_MAX)
        balance.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(balance)
        logger.info("points set manually: user=%s points=%d", user_id, balance.points)
        return balance

    def get_rank(self, user_id: int) -> Optional[int]:
        """Competition rank: tied balances share a rank."""
        mine = (
            self.db.query(UserPoints.points)
            .filter(UserPoints.user_id == user_id)
            .scalar()
        )
        if mine is None:
            return None
        ahead = (
            self.db.query(func.count(UserPoints.id))
            .filter(UserPoints.points > mine)
            .scalar()
        )
        return ahead + 1

    # ─── History & leaderboard ──────────────────────────────────────────────────

    def get_log(self, user_id: int, limit: int = 50, offset: int = 0) -> List[PointActionLog]:
        return (
            self.db.query(PointActionLog)
            .filter(PointActionLog.user_id == user_id)
            .order_by(PointActionLog.created_at.desc(), PointActionLog.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count_log(self, user_id: int) -> int:
        return (
            self.db.query(func.count(PointActionLog.id))
            .filter(PointActionLog.user_id == user_id)
            .scalar()
        )

    def get_leaderboard(self, limit: int, offset: int = 0) -> Tuple[List[dict], int]:
        total = self.db.query(func.count(UserPoints.id)).scalar()
        rank = func.rank().over(order_by=UserPoints.points.desc()).label("rank")
        rows = (
            self.db.query(UserPoints.user_id, User.name, UserPoints.points, rank)
            .join(User, User.id == UserPoints.user_id)
            .order_by(UserPoints.points.desc(), UserPoints.user_id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        users = [
            {"user_id": r.user_id, "name": r.name, "points": r.points, "rank": r.rank}
            for r in rows
        ]
        return users, total
