"""
Player Profile Context

Owns one load cycle of the match log: the ingested records, the known id
set and the aggregated statistics. The presentation layer receives a
ProfileContext and only ever reads from it.

A context whose load failed is "not ready": every query then answers as if
the player were unknown, so callers can show a data-unavailable state.

Usage:
    context = ProfileContext.load("game_records.csv")
    if context.is_valid_user_id(player_id):
        view = context.get_profile(player_id)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from matchprofile.achievements import Achievement, classify
from matchprofile.aggregate import (
    NormalizedRadarVector,
    PlayerStats,
    aggregate,
    count_total_matches,
    normalize,
)
from matchprofile.core.config import MatchProfileConfig, load_config
from matchprofile.core.constants import RADAR_AXES, RADAR_AXIS_LABELS
from matchprofile.core.utils import PerformanceMonitor
from matchprofile.ingest import IngestError, IngestResult, ingest
from matchprofile.loader import SourceLoadError, afetch_source_text, fetch_source_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileContext:
    """Immutable result of one load cycle plus the query surface over it."""

    stats: Mapping[str, PlayerStats] = field(default_factory=lambda: MappingProxyType({}))
    known_ids: frozenset[str] = frozenset()
    total_matches: int = 0
    ready: bool = False
    load_error: str | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls, reason: str | None = None) -> ProfileContext:
        """A not-ready context that answers every query with not-found."""
        return cls(ready=False, load_error=reason)

    @classmethod
    def from_ingest(cls, result: IngestResult) -> ProfileContext:
        stats = aggregate(result.records)
        context = cls(
            stats=MappingProxyType(stats),
            known_ids=result.known_ids,
            total_matches=count_total_matches(result.records),
            ready=True,
        )
        logger.info(f"Data initialized, valid users: {context.valid_user_ids}")
        return context

    @classmethod
    def from_text(cls, raw_text: str, config: MatchProfileConfig | None = None) -> ProfileContext:
        """
        Build a context from match log text.

        Raises:
            IngestError: If the log header is unusable
        """
        config = config or load_config()
        return cls.from_ingest(ingest(raw_text, config.ingest))

    @classmethod
    def load(
        cls, source: str | Path | None = None, config: MatchProfileConfig | None = None
    ) -> ProfileContext:
        """
        Fetch, parse and aggregate the match log.

        Never raises for load failures: they are logged and produce a
        not-ready context carrying the error message.
        """
        config = config or load_config()
        source = source if source is not None else config.source.default_source

        try:
            with PerformanceMonitor(f"Loading match log {source}"):
                raw_text = fetch_source_text(source, config.source)
                return cls.from_text(raw_text, config)
        except (SourceLoadError, IngestError, OverflowError) as e:
            logger.error(f"Data load failed: {e}")
            return cls.empty(str(e))

    @classmethod
    async def aload(
        cls, source: str | Path | None = None, config: MatchProfileConfig | None = None
    ) -> ProfileContext:
        """Async variant of load(); the fetch is the only await point."""
        config = config or load_config()
        source = source if source is not None else config.source.default_source

        try:
            with PerformanceMonitor(f"Loading match log {source}"):
                raw_text = await afetch_source_text(source, config.source)
                return cls.from_text(raw_text, config)
        except (SourceLoadError, IngestError, OverflowError) as e:
            logger.error(f"Data load failed: {e}")
            return cls.empty(str(e))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def valid_user_ids(self) -> list[str]:
        return sorted(self.known_ids)

    @property
    def player_count(self) -> int:
        return len(self.stats)

    def is_valid_user_id(self, user_id: str | None) -> bool:
        if not user_id:
            return False
        return user_id.strip() in self.known_ids

    def get_user_stats(self, user_id: str) -> PlayerStats | None:
        return self.stats.get(user_id)

    def get_normalized_radar_data(self, user_id: str) -> NormalizedRadarVector | None:
        return normalize(user_id, self.stats)

    def get_user_achievements(self, user_id: str) -> list[Achievement]:
        stats = self.get_user_stats(user_id)
        if stats is None:
            return []
        return classify(stats)

    def get_profile(self, user_id: str) -> dict | None:
        """
        Everything a profile view renders for one player, JSON ready.

        Returns None when the player has no statistics.
        """
        stats = self.get_user_stats(user_id)
        if stats is None:
            return None

        radar = self.get_normalized_radar_data(user_id)
        return {
            "userId": user_id,
            "stats": stats.to_dict(),
            "radar": radar.to_dict() if radar else None,
            "radarLabels": [RADAR_AXIS_LABELS[axis] for axis in RADAR_AXES],
            "achievements": [a.to_dict() for a in self.get_user_achievements(user_id)],
        }
