from voterblock.news.base import NewsSearcher, NoNewsFoundError
from voterblock.news.claude import ClaudeNewsSearcher
from voterblock.news.extractor import extract_articles

__all__ = [
    "ClaudeNewsSearcher",
    "NewsSearcher",
    "NoNewsFoundError",
    "extract_articles",
]
