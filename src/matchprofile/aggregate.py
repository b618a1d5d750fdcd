"""
Player Aggregation Engine

Groups match records by player and computes per-player summary statistics,
then rescales them against the whole population for radar display.

Statistics per player:
- totalGames / wins / winRate
- totalScore / avgScore / maxScore
- scoreStdDev (population standard deviation, around the player's own mean)
- attendanceRate (share of all distinct match dates the player appears on)

All reductions are order independent; aggregating the same records twice
yields equal results.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np
import pandas as pd

from matchprofile.core.constants import RADAR_AXES, UNIFORM_STABILITY
from matchprofile.core.utils import clamp, round_half_up, safe_divide, timed
from matchprofile.ingest import MatchRecord, records_to_frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerStats:
    """Summary statistics for one player over the whole match log."""

    player_id: str
    total_games: int
    wins: int
    win_rate: float  # percent, 1 decimal
    avg_score: int
    max_score: int
    score_std_dev: float  # 1 decimal
    attendance_rate: float  # percent, 1 decimal
    total_score: int

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "totalGames": self.total_games,
            "wins": self.wins,
            "winRate": self.win_rate,
            "avgScore": self.avg_score,
            "maxScore": self.max_score,
            "scoreStdDev": self.score_std_dev,
            "attendanceRate": self.attendance_rate,
            "totalScore": self.total_score,
        }


@dataclass(frozen=True)
class NormalizedRadarVector:
    """A player's statistics rescaled to 0-100 against the population."""

    win_rate: float
    avg_score: float
    max_score: float
    attendance_rate: float
    stability: float

    def to_dict(self) -> dict[str, float]:
        return dict(zip(RADAR_AXES, self.as_list()))

    def as_list(self) -> list[float]:
        """Values in radar axis order."""
        return [
            self.win_rate,
            self.avg_score,
            self.max_score,
            self.attendance_rate,
            self.stability,
        ]


def _as_frame(records: Iterable[MatchRecord] | pd.DataFrame) -> pd.DataFrame:
    if isinstance(records, pd.DataFrame):
        return records
    return records_to_frame(records)


def count_total_matches(records: Iterable[MatchRecord] | pd.DataFrame) -> int:
    """Number of distinct match dates across all records."""
    df = _as_frame(records)
    if df.empty:
        return 0
    return int(df["match_date"].nunique())


@timed
def aggregate(records: Iterable[MatchRecord] | pd.DataFrame) -> dict[str, PlayerStats]:
    """
    Compute PlayerStats for every player appearing in the records.

    Args:
        records: MatchRecord rows, or a frame built by records_to_frame

    Returns:
        Mapping of player id to PlayerStats (empty when there are no records)
    """
    df = _as_frame(records)
    if df.empty:
        return {}

    total_matches = int(df["match_date"].nunique())

    grouped = df.groupby("player_id", sort=True)
    summary = grouped.agg(
        total_games=("score", "size"),
        wins=("is_win", "sum"),
        total_score=("score", "sum"),
        max_score=("score", "max"),
        dates_played=("match_date", "nunique"),
    )
    summary["std_score"] = grouped["score"].std(ddof=0)

    stats: dict[str, PlayerStats] = {}
    for row in summary.itertuples():
        player_id = str(row.Index)
        total_games = int(row.total_games)
        wins = int(row.wins)
        total_score = int(row.total_score)
        win_rate = safe_divide(wins, total_games) * 100
        avg_score = safe_divide(total_score, total_games)
        # std(ddof=0) is NaN only for an empty group
        std_dev = 0.0 if pd.isna(row.std_score) else float(row.std_score)
        attendance = safe_divide(int(row.dates_played), total_matches) * 100

        stats[player_id] = PlayerStats(
            player_id=player_id,
            total_games=total_games,
            wins=wins,
            win_rate=round_half_up(win_rate, 1),
            avg_score=int(round_half_up(avg_score)),
            max_score=int(row.max_score),
            score_std_dev=round_half_up(std_dev, 1),
            attendance_rate=round_half_up(attendance, 1),
            total_score=total_score,
        )

    logger.debug(f"Aggregated {len(stats)} players over {total_matches} match dates")
    return stats


def _scale_to_max(value: float, population_max: float) -> float:
    # A non-positive maximum leaves nothing to scale against
    if population_max <= 0:
        return 0.0
    if value == population_max:
        return 100.0
    return clamp(100.0 * value / population_max, 0.0, 100.0)


def normalize(player_id: str, all_stats: Mapping[str, PlayerStats]) -> NormalizedRadarVector | None:
    """
    Rescale one player's statistics against the current population.

    winRate, avgScore and maxScore are divided by the population maximum;
    attendanceRate is already a percentage and passes through. Stability maps
    the lowest score dispersion to 100 and the highest to 0; when every
    player has the same dispersion all players get 100.

    Args:
        player_id: Player to rescale
        all_stats: The full population, as returned by aggregate()

    Returns:
        NormalizedRadarVector, or None if the player is unknown
    """
    stats = all_stats.get(player_id)
    if stats is None:
        return None

    population = list(all_stats.values())
    win_rates = np.array([s.win_rate for s in population], dtype=float)
    avg_scores = np.array([s.avg_score for s in population], dtype=float)
    max_scores = np.array([s.max_score for s in population], dtype=float)
    std_devs = np.array([s.score_std_dev for s in population], dtype=float)

    min_sd = float(std_devs.min())
    max_sd = float(std_devs.max())
    if max_sd == min_sd:
        stability = UNIFORM_STABILITY
    else:
        stability = 100.0 * (max_sd - stats.score_std_dev) / (max_sd - min_sd)

    return NormalizedRadarVector(
        win_rate=_scale_to_max(stats.win_rate, float(win_rates.max())),
        avg_score=_scale_to_max(stats.avg_score, float(avg_scores.max())),
        max_score=_scale_to_max(stats.max_score, float(max_scores.max())),
        attendance_rate=stats.attendance_rate,
        stability=stability,
    )
