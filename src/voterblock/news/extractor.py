"""Extraction of structured news articles from free-form model output.

The search model is asked for a numbered list of articles, each with a quoted
title followed by labeled ``URL``, ``Publication Date``, ``Source`` and
``Summary`` fields, and a trailing "Recent Developments" section of links.
Models decorate this with markdown emphasis inconsistently, so every marker
and label tolerates optional ``**`` around it.

Parsing is heuristic. A title ends at its first closing quote, so titles that
quote someone are truncated.
"""

import logging
import re

from voterblock.data import NewsArticle
from voterblock.url import extract_domain, strip_tracking_params

logger = logging.getLogger(__name__)

# Fewer primary entries than this triggers link harvesting.
MIN_PRIMARY_ARTICLES = 3

_BOLD = r"\*{0,2}"

_ENTRY_RE = re.compile(
    rf'{_BOLD}(?P<number>\d+)\.?{_BOLD}\s*{_BOLD}"(?P<title>[^"]+)"{_BOLD}\s*'
    rf'(?P<body>.*?)(?={_BOLD}\d+\.?{_BOLD}\s*{_BOLD}"|\Z)',
    re.DOTALL,
)
_LABELED_URL_RE = re.compile(rf"URL:{_BOLD}\s*\(\[(?P<label>[^\]]+)\]\((?P<target>[^)]+)\)\)")
_BARE_URL_RE = re.compile(r"\((?P<target>[^)]+\.[a-z]{2,}[^)]*)\)")
_DATE_RE = re.compile(rf"Publication Date:{_BOLD}\s*(?P<value>[^\n]+)")
_SOURCE_RE = re.compile(rf"Source:{_BOLD}\s*(?P<value>[^\n]+)")
_SUMMARY_RE = re.compile(rf"Summary:{_BOLD}\s*(?P<value>.+?)(?=\n\n|\Z)", re.DOTALL)

_RECENT_HEADING_RE = re.compile(r"#+\s*Recent Developments")
_LINK_RE = re.compile(r"\[(?P<text>[^\]]+)\]\((?P<target>[^)]+)\)")


def _find_url(body: str) -> str:
    """Find the article URL, preferring the labeled form over a bare parenthetical."""
    match = _LABELED_URL_RE.search(body)
    if match is None:
        match = _BARE_URL_RE.search(body)
    if match is None:
        return ""
    return strip_tracking_params(match.group("target"))


def _find_field(pattern: re.Pattern[str], body: str) -> str:
    match = pattern.search(body)
    return match.group("value").strip() if match else ""


def _parse_numbered_entries(content: str) -> list[NewsArticle]:
    articles: list[NewsArticle] = []
    for match in _ENTRY_RE.finditer(content):
        title = match.group("title").strip()
        body = match.group("body").strip()
        if not title or not body:
            continue

        articles.append(
            NewsArticle(
                title=title,
                url=_find_url(body),
                date=_find_field(_DATE_RE, body),
                source=_find_field(_SOURCE_RE, body),
                snippet=_find_field(_SUMMARY_RE, body),
            )
        )
    return articles


def _harvest_recent_links(content: str, articles: list[NewsArticle]) -> list[NewsArticle]:
    """Collect links from the "Recent Developments" section not already in ``articles``."""
    heading = _RECENT_HEADING_RE.search(content)
    if heading is None:
        return []

    seen_titles = {article.title for article in articles}
    harvested: list[NewsArticle] = []
    for match in _LINK_RE.finditer(content, heading.start()):
        title = match.group("text").strip()
        if title in seen_titles:
            continue
        seen_titles.add(title)

        url = strip_tracking_params(match.group("target"))
        harvested.append(NewsArticle(title=title, url=url, source=extract_domain(url)))
    return harvested


def extract_articles(content: str) -> list[NewsArticle]:
    """Parse model output into news articles.

    Numbered entries are parsed first. When fewer than ``MIN_PRIMARY_ARTICLES``
    are found, links from a trailing "Recent Developments" section are appended.

    Args:
        content: Free-form text returned by the search model.

    Returns:
        Articles in document order, numbered entries first. Empty if nothing
        could be parsed.
    """
    articles = _parse_numbered_entries(content)

    if len(articles) < MIN_PRIMARY_ARTICLES:
        articles.extend(_harvest_recent_links(content, articles))

    logger.debug(f"Parsed {len(articles)} articles from {len(content)} chars")
    return articles
