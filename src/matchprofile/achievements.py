"""
Achievement Classification

Maps a player's statistics to one badge per category. Each category is a
ladder of tiers evaluated top-down; the first tier whose threshold the
statistic satisfies wins, and the last tier of every ladder is a catch-all.

Ladders (tier 5 down to tier 1):
- winRate     win_rate >= 80 / 60 / 40 / 20 / else
- avgScore    avg_score >= 2000 / 1000 / 500 / 100 / else
- attendance  attendance_rate >= 90 / 70 / 50 / 30 / else
- stability   score_std_dev < 300 / 600 / 1000 / 1500 / else
- maxScore    max_score >= 5000 / 3000 / 1500 / 500 / else
"""

from __future__ import annotations

from dataclasses import dataclass

from matchprofile.aggregate import PlayerStats
from matchprofile.core.constants import (
    DEFAULT_ACHIEVEMENT_DESCRIPTION,
    AchievementCategory,
    Comparison,
)


@dataclass(frozen=True)
class Tier:
    """One rung of a ladder; threshold None marks the catch-all tier."""

    threshold: float | None
    level: int
    name: str
    icon: str


@dataclass(frozen=True)
class Ladder:
    """Ordered tiers for one achievement category."""

    category: AchievementCategory
    metric: str  # PlayerStats attribute
    comparison: Comparison
    description: str
    tiers: tuple[Tier, ...]


@dataclass(frozen=True)
class Achievement:
    """A badge awarded in one category."""

    category: AchievementCategory
    tier: int
    name: str
    icon: str
    description: str = DEFAULT_ACHIEVEMENT_DESCRIPTION

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": str(self.category),
            "level": self.tier,
            "name": self.name,
            "icon": self.icon,
            "description": self.description,
        }


# =============================================================================
# Ladder Definitions
# =============================================================================

LADDERS: tuple[Ladder, ...] = (
    Ladder(
        category=AchievementCategory.WIN_RATE,
        metric="win_rate",
        comparison=Comparison.AT_LEAST,
        description="胜率表现",
        tiers=(
            Tier(80, 5, "战神", "⭐"),
            Tier(60, 4, "常胜将军", "✨"),
            Tier(40, 3, "稳健选手", "🔥"),
            Tier(20, 2, "拼搏者", "⚡"),
            Tier(None, 1, "重在参与", "🌱"),
        ),
    ),
    Ladder(
        category=AchievementCategory.AVG_SCORE,
        metric="avg_score",
        comparison=Comparison.AT_LEAST,
        description="得分能力",
        tiers=(
            Tier(2000, 5, "得分王", "🏆"),
            Tier(1000, 4, "高分高手", "💎"),
            Tier(500, 3, "中坚力量", "🔥"),
            Tier(100, 2, "稳定输出", "⚡"),
            Tier(None, 1, "积累中", "🌱"),
        ),
    ),
    Ladder(
        category=AchievementCategory.ATTENDANCE,
        metric="attendance_rate",
        comparison=Comparison.AT_LEAST,
        description="参与程度",
        tiers=(
            Tier(90, 5, "全勤王", "📅"),
            Tier(70, 4, "活跃之星", "✨"),
            Tier(50, 3, "经常参与", "🔄"),
            Tier(30, 2, "偶尔露面", "👀"),
            Tier(None, 1, "新秀", "🆕"),
        ),
    ),
    Ladder(
        category=AchievementCategory.STABILITY,
        metric="score_std_dev",
        comparison=Comparison.BELOW,
        description="表现稳定性",
        tiers=(
            Tier(300, 5, "稳定先生", "🎯"),
            Tier(600, 4, "表现平稳", "⚖️"),
            Tier(1000, 3, "起伏型", "🎢"),
            Tier(1500, 2, "大起大落", "🌊"),
            Tier(None, 1, "过山车", "🎡"),
        ),
    ),
    Ladder(
        category=AchievementCategory.MAX_SCORE,
        metric="max_score",
        comparison=Comparison.AT_LEAST,
        description="单场爆发",
        tiers=(
            Tier(5000, 5, "纪录创造者", "🏅"),
            Tier(3000, 4, "爆发型选手", "💥"),
            Tier(1500, 3, "高光时刻", "🌟"),
            Tier(500, 2, "潜力股", "📈"),
            Tier(None, 1, "稳步成长", "🌿"),
        ),
    ),
)

CATEGORY_DESCRIPTIONS = {ladder.category: ladder.description for ladder in LADDERS}


def _satisfies(value: float, threshold: float, comparison: Comparison) -> bool:
    if comparison is Comparison.BELOW:
        return value < threshold
    return value >= threshold


def first_matching_tier(value: float, tiers: tuple[Tier, ...], comparison: Comparison) -> Tier:
    """
    Return the first tier of a ladder that ``value`` satisfies.

    Args:
        value: The statistic being classified
        tiers: Ladder tiers, best first, ending with a catch-all
        comparison: AT_LEAST for descending thresholds, BELOW for ascending

    Returns:
        The matching Tier
    """
    for tier in tiers:
        if tier.threshold is None or _satisfies(value, tier.threshold, comparison):
            return tier
    # Every shipped ladder ends with a catch-all
    raise ValueError(f"No tier matches value {value!r}")


def classify_ladder(stats: PlayerStats, ladder: Ladder) -> Achievement:
    """Award the single achievement one ladder gives these statistics."""
    tier = first_matching_tier(getattr(stats, ladder.metric), ladder.tiers, ladder.comparison)
    return Achievement(
        category=ladder.category,
        tier=tier.level,
        name=tier.name,
        icon=tier.icon,
        description=ladder.description,
    )


def classify(stats: PlayerStats) -> list[Achievement]:
    """One achievement per category, in ladder order."""
    return [classify_ladder(stats, ladder) for ladder in LADDERS]


def describe_category(category: str) -> str:
    """Display description for an achievement category."""
    try:
        return CATEGORY_DESCRIPTIONS[AchievementCategory(category)]
    except ValueError:
        return DEFAULT_ACHIEVEMENT_DESCRIPTION
