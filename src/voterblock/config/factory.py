"""Factory functions to create components from configuration."""

from pathlib import Path

from voterblock.civic.base import RepresentativeLookup
from voterblock.civic.google import GoogleCivicClient
from voterblock.config.models import (
    ClaudeNewsSearcherConfig,
    GoogleCivicClientConfig,
    VoterBlockConfig,
)
from voterblock.news.base import NewsSearcher
from voterblock.news.claude import ClaudeNewsSearcher
from voterblock.run_logger import RunLogger
from voterblock.service import VoterBlockService


def create_news_searcher(config: ClaudeNewsSearcherConfig) -> NewsSearcher:
    """Create a news searcher from config."""
    if isinstance(config, ClaudeNewsSearcherConfig):
        return ClaudeNewsSearcher(
            model=config.model,
            max_searches=config.max_searches,
            max_tokens=config.max_tokens,
        )
    msg = f"Unknown news searcher config type: {type(config)}"
    raise ValueError(msg)


def create_civic_client(config: GoogleCivicClientConfig) -> RepresentativeLookup:
    """Create a representative lookup client from config."""
    if isinstance(config, GoogleCivicClientConfig):
        return GoogleCivicClient(
            api_url=config.api_url,
            levels=config.levels,
            timeout=config.timeout,
        )
    msg = f"Unknown civic client config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: VoterBlockConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[VoterBlockService, RunLogger | None]:
    """Create the lookup service from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (service, run_logger). run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    service = VoterBlockService(
        civic=create_civic_client(config.civic),
        news=create_news_searcher(config.news),
        run_logger=run_logger,
    )
    return (service, run_logger)
