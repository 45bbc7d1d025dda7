from typing import Protocol

from voterblock.data import NewsArticle, Usage


class NoNewsFoundError(Exception):
    """The search model returned no text to extract articles from."""


class NewsSearcher(Protocol):
    """Interface for searching recent news about an official."""

    async def search(self, query: str) -> tuple[list[NewsArticle], Usage]:
        """Search for recent news matching the query.

        Args:
            query: Free-text query, typically "<name> <office>".

        Returns:
            Tuple of (articles, usage).
        """
        ...
