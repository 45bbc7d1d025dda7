"""URL handling utilities."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def strip_tracking_params(url: str) -> str:
    """Drop the query string (and anything after it) from a URL."""
    return url.split("?", 1)[0]


def extract_domain(url: str) -> str:
    """Extract domain name from URL.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The domain name (without 'www.' prefix), or "" if extraction fails.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        logger.debug(f"Could not parse url {url}")
        return ""
    domain = parsed.netloc
    if not domain:
        logger.debug(f"Could not get domain from url {url}")
        return ""
    # Remove www. prefix
    if domain.startswith("www."):
        domain = domain[4:]
    return domain
