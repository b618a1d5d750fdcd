"""Tests for achievement classification."""

import pytest

from matchprofile.achievements import (
    LADDERS,
    Achievement,
    Tier,
    classify,
    describe_category,
    first_matching_tier,
)
from matchprofile.aggregate import PlayerStats
from matchprofile.core.constants import AchievementCategory, Comparison


def _stats(**overrides) -> PlayerStats:
    values = dict(
        player_id="P",
        total_games=10,
        wins=5,
        win_rate=50.0,
        avg_score=500,
        max_score=1000,
        score_std_dev=200.0,
        attendance_rate=50.0,
        total_score=5000,
    )
    values.update(overrides)
    return PlayerStats(**values)


def _achievement(stats: PlayerStats, category: AchievementCategory) -> Achievement:
    return next(a for a in classify(stats) if a.category == category)


class TestClassify:
    """Tests for the five-badge result."""

    def test_one_badge_per_category_in_order(self):
        """Verify exactly five achievements in presentation order."""
        achievements = classify(_stats())

        assert [a.category for a in achievements] == [
            AchievementCategory.WIN_RATE,
            AchievementCategory.AVG_SCORE,
            AchievementCategory.ATTENDANCE,
            AchievementCategory.STABILITY,
            AchievementCategory.MAX_SCORE,
        ]

    def test_example_player(self):
        """Verify the badges of P1 from the example log."""
        stats = _stats(
            total_games=2,
            wins=1,
            win_rate=50.0,
            avg_score=200,
            max_score=300,
            score_std_dev=100.0,
            attendance_rate=100.0,
            total_score=400,
        )
        names = [a.name for a in classify(stats)]
        assert names == ["稳健选手", "稳定输出", "全勤王", "稳定先生", "稳步成长"]

    def test_top_tiers(self):
        """Verify maximal statistics earn tier 5 everywhere."""
        stats = _stats(
            win_rate=100.0,
            avg_score=9000,
            max_score=9000,
            attendance_rate=100.0,
            score_std_dev=0.0,
        )
        assert all(a.tier == 5 for a in classify(stats))

    def test_bottom_tiers(self):
        """Verify minimal statistics fall through to the catch-all tier."""
        stats = _stats(
            win_rate=0.0,
            avg_score=0,
            max_score=0,
            attendance_rate=0.0,
            score_std_dev=5000.0,
        )
        achievements = classify(stats)

        assert all(a.tier == 1 for a in achievements)
        assert [a.icon for a in achievements] == ["🌱", "🌱", "🆕", "🎡", "🌿"]

    def test_to_dict(self):
        """Verify serialization keys used by the presentation layer."""
        achievement = _achievement(_stats(win_rate=85.0), AchievementCategory.WIN_RATE)

        assert achievement.to_dict() == {
            "type": "winRate",
            "level": 5,
            "name": "战神",
            "icon": "⭐",
            "description": "胜率表现",
        }


class TestLadderBoundaries:
    """Tests for inclusive/exclusive threshold edges."""

    def test_avg_score_2000_is_top_tier(self):
        """Verify an average of exactly 2000 earns the top tier."""
        achievement = _achievement(_stats(avg_score=2000), AchievementCategory.AVG_SCORE)
        assert achievement.tier == 5
        assert achievement.name == "得分王"

    def test_avg_score_1999_is_next_tier(self):
        """Verify an average of 1999 drops one tier."""
        achievement = _achievement(_stats(avg_score=1999), AchievementCategory.AVG_SCORE)
        assert achievement.tier == 4
        assert achievement.name == "高分高手"

    @pytest.mark.parametrize(
        "win_rate,tier",
        [(80.0, 5), (79.9, 4), (60.0, 4), (40.0, 3), (20.0, 2), (19.9, 1)],
    )
    def test_win_rate_edges(self, win_rate, tier):
        """Verify win rate thresholds are inclusive."""
        assert _achievement(_stats(win_rate=win_rate), AchievementCategory.WIN_RATE).tier == tier

    @pytest.mark.parametrize(
        "std_dev,tier",
        [(299.9, 5), (300.0, 4), (599.9, 4), (600.0, 3), (1000.0, 2), (1499.9, 2), (1500.0, 1)],
    )
    def test_stability_edges(self, std_dev, tier):
        """Verify stability thresholds are exclusive upper bounds."""
        achievement = _achievement(_stats(score_std_dev=std_dev), AchievementCategory.STABILITY)
        assert achievement.tier == tier

    @pytest.mark.parametrize(
        "attendance,tier",
        [(90.0, 5), (89.9, 4), (70.0, 4), (50.0, 3), (30.0, 2), (29.9, 1)],
    )
    def test_attendance_edges(self, attendance, tier):
        """Verify attendance thresholds are inclusive."""
        achievement = _achievement(
            _stats(attendance_rate=attendance), AchievementCategory.ATTENDANCE
        )
        assert achievement.tier == tier

    @pytest.mark.parametrize(
        "max_score,tier",
        [(5000, 5), (4999, 4), (3000, 4), (1500, 3), (500, 2), (499, 1)],
    )
    def test_max_score_edges(self, max_score, tier):
        """Verify max score thresholds are inclusive."""
        achievement = _achievement(_stats(max_score=max_score), AchievementCategory.MAX_SCORE)
        assert achievement.tier == tier


class TestLadderTables:
    """Tests for the ladder data and generic matcher."""

    def test_every_ladder_has_five_tiers_and_catch_all(self):
        """Verify ladder shape."""
        for ladder in LADDERS:
            assert [t.level for t in ladder.tiers] == [5, 4, 3, 2, 1]
            assert ladder.tiers[-1].threshold is None
            assert all(t.threshold is not None for t in ladder.tiers[:-1])

    def test_first_matching_tier_directions(self):
        """Verify the matcher honours the comparison direction."""
        tiers = (Tier(10, 2, "high", "h"), Tier(None, 1, "low", "l"))

        assert first_matching_tier(10, tiers, Comparison.AT_LEAST).name == "high"
        assert first_matching_tier(10, tiers, Comparison.BELOW).name == "low"
        assert first_matching_tier(9, tiers, Comparison.BELOW).name == "high"

    def test_no_catch_all_raises(self):
        """Verify a ladder without a catch-all reports the gap."""
        with pytest.raises(ValueError):
            first_matching_tier(1, (Tier(10, 1, "x", "x"),), Comparison.AT_LEAST)

    def test_describe_category(self):
        """Verify category descriptions and the generic fallback."""
        assert describe_category("maxScore") == "单场爆发"
        assert describe_category("attendance") == "参与程度"
        assert describe_category("unknown") == "游戏成就"
