"""
Match log source loading.

Fetches the raw match log text once per load cycle, either from a local
file or from an http(s) URL.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from matchprofile.core.config import SourceConfig

logger = logging.getLogger(__name__)


class SourceLoadError(RuntimeError):
    """Raised when the match log cannot be fetched or read."""


def is_remote(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _decode(content: bytes, encoding: str) -> str:
    try:
        return content.decode(encoding)
    except UnicodeDecodeError as e:
        raise SourceLoadError(f"Match log is not valid {encoding}: {e}") from e


def _read_file(path: Path, config: SourceConfig) -> str:
    try:
        content = path.read_bytes()
    except OSError as e:
        raise SourceLoadError(f"Cannot read match log {path}: {e}") from e
    return _decode(content, config.encoding)


def fetch_source_text(
    source: str | Path,
    config: SourceConfig | None = None,
    client: httpx.Client | None = None,
) -> str:
    """
    Fetch the match log text.

    Args:
        source: Local path or http(s) URL
        config: Timeout and encoding settings
        client: Optional httpx client to reuse

    Returns:
        Decoded log text

    Raises:
        SourceLoadError: If the source cannot be fetched or decoded
    """
    config = config or SourceConfig()

    if not is_remote(source):
        return _read_file(Path(source), config)

    logger.info(f"Fetching match log from {source}")
    try:
        if client is not None:
            response = client.get(str(source), timeout=config.timeout_seconds)
        else:
            response = httpx.get(str(source), timeout=config.timeout_seconds)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise SourceLoadError(f"Cannot fetch match log from {source}: {e}") from e

    return _decode(response.content, config.encoding)


async def afetch_source_text(
    source: str | Path,
    config: SourceConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Async variant of fetch_source_text for callers running an event loop."""
    config = config or SourceConfig()

    if not is_remote(source):
        return _read_file(Path(source), config)

    logger.info(f"Fetching match log from {source}")
    try:
        if client is not None:
            response = await client.get(str(source), timeout=config.timeout_seconds)
        else:
            async with httpx.AsyncClient() as owned_client:
                response = await owned_client.get(str(source), timeout=config.timeout_seconds)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise SourceLoadError(f"Cannot fetch match log from {source}: {e}") from e

    return _decode(response.content, config.encoding)
