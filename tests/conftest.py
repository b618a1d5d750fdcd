"""Shared fixtures for the MatchProfile test suite."""

import pytest

HEADER = "player_id,match_date,score,result_type"

SAMPLE_LOG = "\n".join(
    [
        HEADER,
        "P1,2024-01-01,100,胜利",
        "P1,2024-01-02,300,失败",
        "P2,2024-01-01,500,胜利",
    ]
)

CONFIG_ENV_VARS = (
    "MATCHPROFILE_LOG_LEVEL",
    "MATCHPROFILE_LOG_FILE",
    "MATCHPROFILE_DELIMITER",
    "MATCHPROFILE_WIN_SENTINEL",
    "MATCHPROFILE_SOURCE",
    "MATCHPROFILE_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Keep user config files and MATCHPROFILE_* variables out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_log() -> str:
    """The three-row log used throughout the examples."""
    return SAMPLE_LOG


@pytest.fixture
def sample_log_file(tmp_path, sample_log):
    path = tmp_path / "game_records.csv"
    path.write_text(sample_log, encoding="utf-8")
    return path
