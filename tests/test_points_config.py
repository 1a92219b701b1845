import pytest

from config.points_config import (
    ActionType,
    DiminishingReturns,
    POINT_VALUES,
    tiered_points,
)


def _sequence(action_type, n, base=None):
    base = POINT_VALUES[action_type] if base is None else base
    return [tiered_points(action_type, base, prior) for prior in range(n)]


def test_blog_creation_tiers():
    assert _sequence(ActionType.blog_created, 6) == [10, 10, 5, 0, 0, 0]


def test_like_received_tiers():
    awards = _sequence(ActionType.like_received, 20)
    assert awards[:5] == [2] * 5
    assert awards[5:15] == [1] * 10
    assert awards[15:] == [0] * 5
    assert sum(awards) == 20


def test_comment_created_reduced_tier_is_floored():
    awards = _sequence(ActionType.comment_created, 21)
    assert awards[9] == 5
    assert awards[10] == 2  # 40% of 5, floored
    assert awards[19] == 2
    assert awards[20] == 0


def test_post_created_uses_caller_base():
    assert _sequence(ActionType.post_created, 6, base=15) == [15, 15, 15, 7, 7, 0]


@pytest.mark.parametrize("action_type", [ActionType.comment_received, ActionType.blog_featured])
def test_actions_without_rule_always_full(action_type):
    assert tiered_points(action_type, POINT_VALUES[action_type], 500) == POINT_VALUES[action_type]


def test_non_positive_base_awards_nothing():
    assert tiered_points(ActionType.blog_created, 0, 0) == 0
    assert tiered_points(ActionType.comment_received, -3, 0) == 0


def test_rule_boundaries():
    rule = DiminishingReturns(full_count=1, reduced_count=2, reduced_percent=50)
    assert [rule.points_for(3, n) for n in range(4)] == [3, 1, 1, 0]
