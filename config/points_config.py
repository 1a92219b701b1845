# config/points_config.py

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

class ActionType(str, Enum):
    blog_created      = "blog_created"       # +10, diminishing after 2
    post_created      = "post_created"       # +10/+15 by post type, diminishing after 3
    comment_created   = "comment_created"    # +5, diminishing after 10
    like_received     = "like_received"      # +2, diminishing after 5
    comment_received  = "comment_received"   # +3
    blog_featured     = "blog_featured"      # +50 (one-time per blog)

class PostType(str, Enum):
    discussion   = "discussion"
    general      = "general"
    announcement = "announcement"

# Full reward per action
POINT_VALUES = {
    ActionType.blog_created:       10,
    ActionType.post_created:       10,  # overridden per post type
    ActionType.comment_created:     5,
    ActionType.like_received:       2,
    ActionType.comment_received:    3,
    ActionType.blog_featured:      50,
}

POST_TYPE_POINTS = {
    PostType.discussion:   15,
    PostType.general:      10,
    PostType.announcement:  0,  # admin only, no reward
}

INITIAL_POINTS = 0


@dataclass(frozen=True)
class DiminishingReturns:
    """
    Tier schedule counted over a user's prior actions of one type.

    The first `full_count` actions earn the full reward, the next
    `reduced_count` earn `reduced_percent` of it (floored), anything
    beyond earns nothing.
    """
    full_count: int
    reduced_count: int
    reduced_percent: int

    def points_for(self, base_points: int, prior_count: int) -> int:
        if prior_count < self.full_count:
            return base_points
        if prior_count < self.full_count + self.reduced_count:
            return base_points * self.reduced_percent // 100
        return 0


DIMINISHING_RETURNS: Dict[ActionType, DiminishingReturns] = {
    ActionType.blog_created:    DiminishingReturns(full_count=2,  reduced_count=1,  reduced_percent=50),
    ActionType.post_created:    DiminishingReturns(full_count=3,  reduced_count=2,  reduced_percent=50),
    ActionType.comment_created: DiminishingReturns(full_count=10, reduced_count=10, reduced_percent=40),
    ActionType.like_received:   DiminishingReturns(full_count=5,  reduced_count=10, reduced_percent=50),
}


def tiered_points(action_type: ActionType, base_points: int, prior_count: int) -> int:
    """Points earned for the next action given how many were already logged."""
    if base_points <= 0:
        return 0
    rule: Optional[DiminishingReturns] = DIMINISHING_RETURNS.get(action_type)
    if rule is None:
        return base_points
    return rule.points_for(base_points, prior_count)
