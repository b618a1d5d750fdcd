"""
Match Log Ingestion

Parses the delimited match log into typed MatchRecord rows and collects the
set of known player ids.

Parse policy:
- The header must name every required field, otherwise the whole log is
  rejected with IngestError.
- Rows whose value count differs from the header are skipped.
- Rows whose score is not a base-10 integer within the int64 range are
  skipped; the player id of such a row is still known, since the row
  itself was well formed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import pandas as pd

from matchprofile.core.config import IngestConfig

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["player_id", "match_date", "score", "is_win"]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Scores are stored in an int64 column
SCORE_MIN = -(2**63)
SCORE_MAX = 2**63 - 1


class IngestError(ValueError):
    """Raised when the match log as a whole cannot be parsed."""


@dataclass(frozen=True)
class MatchRecord:
    """One row of the match log."""

    player_id: str
    match_date: str
    score: int
    is_win: bool
    result_type: str = ""
    extra: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class IngestResult:
    """Records accepted from a match log plus parse diagnostics."""

    records: tuple[MatchRecord, ...]
    known_ids: frozenset[str]
    dropped_malformed: int = 0
    dropped_unparsable: int = 0

    def to_frame(self) -> pd.DataFrame:
        return records_to_frame(self.records)


def parse_score(value: str) -> int | None:
    """Parse a base-10 int64 score, returning None when it is not one."""
    if not _INTEGER_RE.fullmatch(value):
        return None
    score = int(value)
    if not SCORE_MIN <= score <= SCORE_MAX:
        return None
    return score


def _split(line: str, delimiter: str) -> list[str]:
    return [part.strip() for part in line.split(delimiter)]


def ingest(raw_text: str, config: IngestConfig | None = None) -> IngestResult:
    """
    Parse a delimited match log.

    Args:
        raw_text: Full text of the log, header line first
        config: Field names, delimiter and win sentinel

    Returns:
        IngestResult with records in file order and the known id set

    Raises:
        IngestError: If the header is missing or lacks a required field
    """
    config = config or IngestConfig()

    lines = raw_text.split("\n")
    if not lines or not lines[0].strip():
        raise IngestError("Match log is empty or has no header line")

    headers = _split(lines[0], config.delimiter)
    missing = [name for name in config.required_fields if name not in headers]
    if missing:
        raise IngestError(f"Match log header is missing required fields: {', '.join(missing)}")

    records: list[MatchRecord] = []
    known_ids: set[str] = set()
    dropped_malformed = 0
    dropped_unparsable = 0

    for line_no, line in enumerate(lines[1:], start=2):
        line = line.strip()
        if not line:
            continue

        values = _split(line, config.delimiter)
        if len(values) != len(headers):
            dropped_malformed += 1
            logger.debug(
                f"Skipping line {line_no}: expected {len(headers)} values, got {len(values)}"
            )
            continue

        row = dict(zip(headers, values))
        player_id = row[config.player_id_field]
        known_ids.add(player_id)

        score = parse_score(row[config.score_field])
        if score is None:
            dropped_unparsable += 1
            logger.debug(f"Skipping line {line_no}: unparsable score {row[config.score_field]!r}")
            continue

        result_type = row[config.result_type_field]
        extra = {k: v for k, v in row.items() if k not in config.required_fields}
        records.append(
            MatchRecord(
                player_id=player_id,
                match_date=row[config.match_date_field],
                score=score,
                is_win=result_type == config.win_sentinel,
                result_type=result_type,
                extra=MappingProxyType(extra),
            )
        )

    if dropped_malformed or dropped_unparsable:
        logger.info(
            f"Ingested {len(records)} records; skipped {dropped_malformed} malformed "
            f"and {dropped_unparsable} unparsable rows"
        )

    return IngestResult(
        records=tuple(records),
        known_ids=frozenset(known_ids),
        dropped_malformed=dropped_malformed,
        dropped_unparsable=dropped_unparsable,
    )


def records_to_frame(records: Iterable[MatchRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per record."""
    rows = [(r.player_id, r.match_date, r.score, r.is_win) for r in records]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return df.astype({"player_id": object, "match_date": object, "score": "int64", "is_win": bool})
