"""
MatchProfile - Constants

Field names of the match log, the win sentinel, and the enums shared by the
aggregation engine and the achievement classifier.
"""

from enum import Enum, StrEnum

# =============================================================================
# Match log format
# =============================================================================

DEFAULT_DELIMITER = ","
DEFAULT_WIN_SENTINEL = "胜利"  # result_type value marking a won match

PLAYER_ID_FIELD = "player_id"
MATCH_DATE_FIELD = "match_date"
SCORE_FIELD = "score"
RESULT_TYPE_FIELD = "result_type"

REQUIRED_FIELDS = (PLAYER_ID_FIELD, MATCH_DATE_FIELD, SCORE_FIELD, RESULT_TYPE_FIELD)


class AchievementCategory(StrEnum):
    """Achievement categories, in the order badges are presented."""

    WIN_RATE = "winRate"
    AVG_SCORE = "avgScore"
    ATTENDANCE = "attendance"
    STABILITY = "stability"
    MAX_SCORE = "maxScore"


class Comparison(str, Enum):
    """How a statistic is compared against a ladder threshold."""

    AT_LEAST = "at_least"  # value >= threshold, higher is better
    BELOW = "below"  # value < threshold, lower is better


# =============================================================================
# Radar chart axes
# =============================================================================

RADAR_AXES = ("winRate", "avgScore", "maxScore", "attendanceRate", "stability")

RADAR_AXIS_LABELS = {
    "winRate": "胜率",
    "avgScore": "平均得分",
    "maxScore": "单场最高分",
    "attendanceRate": "出勤率",
    "stability": "稳定性",
}

# Stability value used when every player has the same score dispersion
UNIFORM_STABILITY = 100.0

DEFAULT_ACHIEVEMENT_DESCRIPTION = "游戏成就"
