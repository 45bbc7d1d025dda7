"""Lookup service tying the civic and news collaborators together."""

import logging
import time

from voterblock.civic.base import RepresentativeLookup
from voterblock.civic.classifier import group_by_level
from voterblock.data import Address, GovernmentLevel, NewsArticle, Representative
from voterblock.news.base import NewsSearcher
from voterblock.run_logger import RunLogger

logger = logging.getLogger(__name__)

REPRESENTATIVES_FAILURE = "Failed to fetch representatives"
NEWS_FAILURE = "Failed to fetch news"


class LookupFailedError(Exception):
    """A lookup failed. The message is safe to show to end users."""


class VoterBlockService:
    """Resolve addresses to representatives and fetch news about them.

    Failures from the collaborators are logged with full detail and re-raised
    as ``LookupFailedError`` carrying only a generic message.

    Args:
        civic: Representative lookup backend.
        news: News search backend.
        run_logger: Optional RunLogger recording each lookup.
    """

    def __init__(
        self,
        civic: RepresentativeLookup,
        news: NewsSearcher,
        *,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._civic = civic
        self._news = news
        self._run_logger = run_logger

    async def lookup_representatives(
        self, address: Address
    ) -> dict[GovernmentLevel, list[Representative]]:
        """Look up an address's representatives grouped by government level.

        Raises:
            LookupFailedError: If the civic lookup fails.
        """
        if self._run_logger:
            self._run_logger.start_run("representatives", address)

        t0 = time.monotonic()
        try:
            representatives, usage = await self._civic.lookup(address)
        except Exception as e:
            logger.exception(f"Error fetching representatives for {address.formatted()}")
            if self._run_logger:
                self._run_logger.log_stage(
                    stage="civic_lookup",
                    component=type(self._civic).__name__,
                    input_data=address,
                    output_data=None,
                    usage=None,
                    duration_seconds=time.monotonic() - t0,
                    error=str(e),
                )
                self._run_logger.finish_run(0, None)
            raise LookupFailedError(REPRESENTATIVES_FAILURE) from e

        logger.info(
            "Processed representatives: "
            + ", ".join(f"{r.name} ({r.level}, {r.office})" for r in representatives)
        )
        if self._run_logger:
            self._run_logger.log_stage(
                stage="civic_lookup",
                component=type(self._civic).__name__,
                input_data=address,
                output_data=representatives,
                usage=usage,
                duration_seconds=time.monotonic() - t0,
            )
            self._run_logger.finish_run(len(representatives), usage)

        return group_by_level(representatives)

    async def find_news(self, name: str, office: str) -> list[NewsArticle]:
        """Find recent news about an official.

        Raises:
            ValueError: If both name and office are blank.
            LookupFailedError: If the news search fails.
        """
        query = f"{name} {office}".strip()
        if not query:
            raise ValueError("Query is required")

        if self._run_logger:
            self._run_logger.start_run("news", {"query": query})

        t0 = time.monotonic()
        try:
            articles, usage = await self._news.search(query)
        except Exception as e:
            logger.exception(f"Error fetching news for {query!r}")
            if self._run_logger:
                self._run_logger.log_stage(
                    stage="news_search",
                    component=type(self._news).__name__,
                    input_data=query,
                    output_data=None,
                    usage=None,
                    duration_seconds=time.monotonic() - t0,
                    error=str(e),
                )
                self._run_logger.finish_run(0, None)
            raise LookupFailedError(NEWS_FAILURE) from e

        if self._run_logger:
            self._run_logger.log_stage(
                stage="news_search",
                component=type(self._news).__name__,
                input_data=query,
                output_data=articles,
                usage=usage,
                duration_seconds=time.monotonic() - t0,
            )
            self._run_logger.finish_run(len(articles), usage)

        return articles
