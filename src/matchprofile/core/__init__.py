"""
MatchProfile Core - Foundation modules shared by the pipeline stages.

- constants: Match log field names, sentinels and enums
- config: Application configuration management
- utils: Rounding, safe division and timing helpers
"""

from matchprofile.core.config import (
    IngestConfig,
    LoggingConfig,
    MatchProfileConfig,
    SourceConfig,
    configure_logging,
    load_config,
)
from matchprofile.core.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_WIN_SENTINEL,
    RADAR_AXES,
    RADAR_AXIS_LABELS,
    REQUIRED_FIELDS,
    AchievementCategory,
    Comparison,
)

__all__ = [
    # Enums
    "AchievementCategory",
    "Comparison",
    # Constants
    "DEFAULT_DELIMITER",
    "DEFAULT_WIN_SENTINEL",
    "RADAR_AXES",
    "RADAR_AXIS_LABELS",
    "REQUIRED_FIELDS",
    # Config
    "IngestConfig",
    "LoggingConfig",
    "MatchProfileConfig",
    "SourceConfig",
    "configure_logging",
    "load_config",
]
