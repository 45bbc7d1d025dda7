"""VoterBlock: find your elected officials and the latest news about them."""

from voterblock.civic import (
    CivicAPIError,
    GoogleCivicClient,
    RepresentativeLookup,
    classify_division,
    group_by_level,
    parse_representatives,
)
from voterblock.config import VoterBlockConfig, create_from_config, load_config
from voterblock.data import (
    Address,
    APICallUsage,
    GovernmentLevel,
    NewsArticle,
    Representative,
    Usage,
)
from voterblock.news import ClaudeNewsSearcher, NewsSearcher, NoNewsFoundError, extract_articles
from voterblock.run_logger import RunLogger
from voterblock.service import LookupFailedError, VoterBlockService
from voterblock.url import extract_domain, strip_tracking_params

__all__ = [
    # Models
    "APICallUsage",
    "Address",
    "GovernmentLevel",
    "NewsArticle",
    "Representative",
    "Usage",
    # Functions
    "classify_division",
    "extract_articles",
    "extract_domain",
    "group_by_level",
    "parse_representatives",
    "strip_tracking_params",
    # Protocols
    "NewsSearcher",
    "RepresentativeLookup",
    # Clients
    "ClaudeNewsSearcher",
    "GoogleCivicClient",
    # Service
    "VoterBlockService",
    # Errors
    "CivicAPIError",
    "LookupFailedError",
    "NoNewsFoundError",
    # Logging
    "RunLogger",
    # Config
    "VoterBlockConfig",
    "create_from_config",
    "load_config",
]
