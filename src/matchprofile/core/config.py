"""
Configuration Management for MatchProfile

Provides configuration loading from multiple sources:
- Default values
- Configuration files (YAML, TOML, JSON)
- Environment variables

Configuration precedence (highest to lowest):
1. Environment variables (MATCHPROFILE_*)
2. Configuration file
3. Default values
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from matchprofile.core.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_WIN_SENTINEL,
    MATCH_DATE_FIELD,
    PLAYER_ID_FIELD,
    RESULT_TYPE_FIELD,
    SCORE_FIELD,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Dataclasses
# ============================================================================


@dataclass
class IngestConfig:
    """Configuration for parsing the match log."""

    delimiter: str = DEFAULT_DELIMITER
    # result_type value that marks a win; the log is localized
    win_sentinel: str = DEFAULT_WIN_SENTINEL

    player_id_field: str = PLAYER_ID_FIELD
    match_date_field: str = MATCH_DATE_FIELD
    score_field: str = SCORE_FIELD
    result_type_field: str = RESULT_TYPE_FIELD

    @property
    def required_fields(self) -> tuple[str, str, str, str]:
        return (
            self.player_id_field,
            self.match_date_field,
            self.score_field,
            self.result_type_field,
        )


@dataclass
class SourceConfig:
    """Configuration for fetching the match log."""

    default_source: str = "game_records.csv"
    timeout_seconds: float = 10.0
    # utf-8-sig strips a BOM left by spreadsheet exports
    encoding: str = "utf-8-sig"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None


@dataclass
class MatchProfileConfig:
    """Main configuration container."""

    ingest: IngestConfig = field(default_factory=IngestConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Version of the config format
    config_version: str = "1.0"


# ============================================================================
# Configuration Loading
# ============================================================================


def get_default_config_paths() -> list[Path]:
    """Get the default paths to search for configuration files."""
    paths = []

    # Current directory
    paths.append(Path.cwd() / "matchprofile.yaml")
    paths.append(Path.cwd() / "matchprofile.toml")
    paths.append(Path.cwd() / "matchprofile.json")

    # XDG config directory
    home = Path.home()
    xdg_config = os.environ.get("XDG_CONFIG_HOME", str(home / ".config"))
    paths.append(Path(xdg_config) / "matchprofile" / "config.yaml")
    paths.append(Path(xdg_config) / "matchprofile" / "config.toml")

    return paths


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a YAML file."""
    import yaml

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_toml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file."""
    import tomllib

    with open(path, "rb") as f:
        return tomllib.load(f)


def load_json_config(path: Path) -> dict[str, Any]:
    """Load configuration from a JSON file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a file, detecting format from extension."""
    if not path.exists():
        return {}

    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return load_yaml_config(path)
    elif suffix == ".toml":
        return load_toml_config(path)
    elif suffix == ".json":
        return load_json_config(path)
    else:
        logger.warning(f"Unknown config file format: {suffix}")
        return {}


def load_env_config() -> dict[str, Any]:
    """Load configuration from environment variables."""
    config: dict[str, Any] = {}

    env_mappings = {
        "MATCHPROFILE_LOG_LEVEL": ("logging", "level"),
        "MATCHPROFILE_LOG_FILE": ("logging", "file"),
        "MATCHPROFILE_DELIMITER": ("ingest", "delimiter"),
        "MATCHPROFILE_WIN_SENTINEL": ("ingest", "win_sentinel"),
        "MATCHPROFILE_SOURCE": ("source", "default_source"),
        "MATCHPROFILE_TIMEOUT": ("source", "timeout_seconds"),
    }
    # Values of these keys stay strings even when they look numeric
    string_keys = {"delimiter", "win_sentinel", "default_source", "file", "level"}

    for env_var, (section, key) in env_mappings.items():
        value: Any = os.environ.get(env_var)
        if value is not None:
            if section not in config:
                config[section] = {}

            if key not in string_keys:
                try:
                    value = float(value)
                except ValueError:
                    pass

            config[section][key] = value

    return config


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two configuration dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def dict_to_config(data: dict[str, Any]) -> MatchProfileConfig:
    """Convert a dictionary to MatchProfileConfig, ignoring unknown keys."""
    config = MatchProfileConfig()

    for section_name in ("ingest", "source", "logging"):
        if section_name in data:
            section = getattr(config, section_name)
            for key, value in data[section_name].items():
                if hasattr(section, key):
                    setattr(section, key, value)
                else:
                    logger.warning(f"Ignoring unknown config key: {section_name}.{key}")

    return config


def load_config(config_file: Path | None = None, include_env: bool = True) -> MatchProfileConfig:
    """
    Load configuration from all sources.

    Args:
        config_file: Explicit path to a config file (optional)
        include_env: Whether to include environment variables

    Returns:
        Merged MatchProfileConfig
    """
    config_data: dict[str, Any] = {}

    if config_file:
        config_data = load_config_file(config_file)
        logger.info(f"Loaded config from: {config_file}")
    else:
        for path in get_default_config_paths():
            if path.exists():
                config_data = load_config_file(path)
                logger.info(f"Loaded config from: {path}")
                break

    if include_env:
        env_config = load_env_config()
        config_data = merge_configs(config_data, env_config)

    return dict_to_config(config_data)


def config_to_dict(config: MatchProfileConfig) -> dict[str, Any]:
    """Convert MatchProfileConfig to a dictionary."""
    return asdict(config)


def save_config(config: MatchProfileConfig, path: Path) -> None:
    """
    Save configuration to a file.

    Args:
        config: Configuration to save
        path: Path to save to (YAML or JSON, detected from extension)
    """
    data = config_to_dict(config)
    suffix = path.suffix.lower()

    if suffix in (".yaml", ".yml"):
        import yaml

        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    elif suffix == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    else:
        raise ValueError(f"Unknown config format: {suffix}")

    logger.info(f"Saved config to: {path}")


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Apply a LoggingConfig to the root logger."""
    config = config or LoggingConfig()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format=config.format,
        handlers=handlers,
        force=True,
    )
