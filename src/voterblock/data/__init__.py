"""Data models for VoterBlock."""

from voterblock.data.models import (
    Address,
    APICallUsage,
    GovernmentLevel,
    NewsArticle,
    Representative,
    Usage,
)

__all__ = [
    "APICallUsage",
    "Address",
    "GovernmentLevel",
    "NewsArticle",
    "Representative",
    "Usage",
]
