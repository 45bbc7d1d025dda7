import logging
import os

import anthropic

from voterblock.data import APICallUsage, NewsArticle, Usage
from voterblock.news.base import NoNewsFoundError
from voterblock.news.extractor import extract_articles

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a helpful assistant that provides news about political figures. \
For each news article you find, provide the following information in a \
numbered list format:
1. Title of the article in quotes
2. URL
3. Publication date
4. Source name
5. A brief summary

At the end, include a 'Recent Developments' section with links to the most \
important articles.\
"""


class ClaudeNewsSearcher:
    """Search for recent news about an official using Claude's web search tool.

    Claude answers in free-form markdown, which is parsed into articles by
    ``extract_articles``. When nothing can be parsed, the raw answer is
    returned as a single article so the caller still has something to show.

    Args:
        api_key: Anthropic API key (defaults to CLAUDE_API_KEY env var).
        model: Model to use for search (default: claude-haiku-4-5-20251001).
        max_searches: Max web searches per request (default: 3).
        max_tokens: Max tokens in the response (default: 2048).
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str = "claude-haiku-4-5-20251001",
        max_searches: int = 3,
        max_tokens: int = 2048,
    ) -> None:
        resolved_key = api_key or os.environ.get("CLAUDE_API_KEY")
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key)
        self._model = model
        self._max_searches = max_searches
        self._max_tokens = max_tokens

    async def search(self, query: str) -> tuple[list[NewsArticle], Usage]:
        """Search for recent news about the query.

        Args:
            query: Free-text query, typically "<name> <office>".

        Returns:
            Tuple of (articles, usage).

        Raises:
            NoNewsFoundError: If the model returned no text at all.
        """
        response = await self._client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            system=SYSTEM_PROMPT,
            tools=[
                {
                    "type": "web_search_20250305",
                    "name": "web_search",
                    "max_uses": self._max_searches,
                }
            ],
            messages=[{"role": "user", "content": f"Find recent news about {query}"}],
        )

        # Count web searches from server_tool_use in usage
        web_searches = 0
        server_tool_use = getattr(response.usage, "server_tool_use", None)
        if server_tool_use is not None:
            web_searches = getattr(server_tool_use, "web_search_requests", 0) or 0

        usage = Usage(
            api_calls=[
                APICallUsage(
                    model=self._model,
                    input_tokens=response.usage.input_tokens,
                    output_tokens=response.usage.output_tokens,
                    cache_creation_input_tokens=getattr(
                        response.usage, "cache_creation_input_tokens", 0
                    )
                    or 0,
                    cache_read_input_tokens=getattr(response.usage, "cache_read_input_tokens", 0)
                    or 0,
                    web_searches=web_searches,
                ),
            ],
        )

        content = ""
        for block in response.content:
            if block.type == "text":
                content += block.text

        if not content.strip():
            raise NoNewsFoundError(f"No news found for {query!r}")

        logger.debug(f"Raw response ({len(content)} chars) for {query!r}")
        articles = extract_articles(content)
        logger.info(f"Parsed {len(articles)} articles for {query!r}")

        if not articles:
            articles = [
                NewsArticle(
                    title="News Results",
                    snippet=content,
                    source="Various Sources",
                )
            ]

        return (articles, usage)
