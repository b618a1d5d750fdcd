"""
MatchProfile - Player statistics and achievements from a match log

Parses a delimited log of match records, aggregates per-player statistics
(win rate, average/max score, score dispersion, attendance), rescales them
against the population for radar display and awards tiered achievements.

Usage:
    from matchprofile import ProfileContext

    context = ProfileContext.load("game_records.csv")
    if context.is_valid_user_id("P1"):
        stats = context.get_user_stats("P1")
        print(f"{stats.win_rate}% over {stats.total_games} games")
"""

__version__ = "0.1.0"
__author__ = "MatchProfile Contributors"


def __getattr__(name):
    """Lazy import for modules pulling in pandas/httpx."""
    if name == "ProfileContext":
        from matchprofile.profile import ProfileContext
        return ProfileContext
    elif name == "MatchRecord":
        from matchprofile.ingest import MatchRecord
        return MatchRecord
    elif name == "IngestError":
        from matchprofile.ingest import IngestError
        return IngestError
    elif name == "normalize":
        from matchprofile.aggregate import normalize
        return normalize
    elif name == "PlayerStats":
        from matchprofile.aggregate import PlayerStats
        return PlayerStats
    elif name == "NormalizedRadarVector":
        from matchprofile.aggregate import NormalizedRadarVector
        return NormalizedRadarVector
    elif name == "classify":
        from matchprofile.achievements import classify
        return classify
    elif name == "Achievement":
        from matchprofile.achievements import Achievement
        return Achievement
    elif name == "SourceLoadError":
        from matchprofile.loader import SourceLoadError
        return SourceLoadError
    raise AttributeError(f"module 'matchprofile' has no attribute '{name}'")


__all__ = [
    # Version
    "__version__",
    # Query surface
    "ProfileContext",
    # Pipeline stages (functions live in matchprofile.ingest / matchprofile.aggregate)
    "MatchRecord",
    "IngestError",
    "normalize",
    "PlayerStats",
    "NormalizedRadarVector",
    "classify",
    "Achievement",
    "SourceLoadError",
]
