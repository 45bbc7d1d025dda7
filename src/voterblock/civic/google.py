"""Representative lookup using the Google Civic Information API."""

import logging
import os
from typing import Any

import httpx

from voterblock.civic.base import CivicAPIError
from voterblock.civic.classifier import classify_division
from voterblock.data import Address, Representative, Usage

CIVIC_API_URL = "https://www.googleapis.com/civicinfo/v2/representatives"
DEFAULT_LEVELS = ("country", "administrativeArea1", "administrativeArea2", "locality")

logger = logging.getLogger(__name__)


def parse_representatives(data: dict[str, Any]) -> list[Representative]:
    """Flatten a civic API response into one record per official per office.

    Args:
        data: Decoded JSON with ``offices`` and ``officials`` arrays.

    Returns:
        Representatives in office order, each classified by government level.
    """
    officials: list[dict[str, Any]] = data.get("officials", [])
    representatives: list[Representative] = []

    for office in data.get("offices", []):
        office_name = office.get("name", "")
        division_id = office.get("divisionId", "")
        level = classify_division(division_id, office_name)

        for index in office.get("officialIndices", []):
            if not 0 <= index < len(officials):
                logger.warning(f"Office {office_name!r} references missing official {index}")
                continue
            official = officials[index]
            representatives.append(
                Representative(
                    name=official.get("name", ""),
                    office=office_name,
                    level=level,
                    division_id=division_id,
                    party=official.get("party"),
                    phones=tuple(official.get("phones", ())),
                    urls=tuple(official.get("urls", ())),
                    emails=tuple(official.get("emails", ())),
                )
            )

    return representatives


class GoogleCivicClient:
    """Look up elected officials for an address via the Google Civic API.

    Args:
        api_key: Google API key (defaults to GOOGLE_API_KEY env var).
        api_url: Representatives endpoint.
        levels: Government levels to request.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        api_url: str = CIVIC_API_URL,
        levels: tuple[str, ...] = DEFAULT_LEVELS,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("GOOGLE_API_KEY")
        if not self._api_key:
            raise ValueError("Google API key required. Pass api_key or set GOOGLE_API_KEY env var.")
        self._api_url = api_url
        self._levels = levels
        self._timeout = timeout

    async def lookup(self, address: Address) -> tuple[list[Representative], Usage]:
        """Look up representatives for an address.

        Args:
            address: The civic address to resolve.

        Returns:
            Tuple of (representatives, usage).

        Raises:
            CivicAPIError: If the API responds with an error status.
        """
        formatted = address.formatted()
        params: list[tuple[str, str]] = [
            ("key", self._api_key),  # type: ignore[list-item]
            ("address", formatted),
        ]
        params.extend(("levels", level) for level in self._levels)

        logger.info(f"Looking up representatives for: {formatted}")
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(
                self._api_url,
                params=params,
                headers={"Accept": "application/json"},
            )

        if response.is_error:
            raise CivicAPIError(_error_message(response))

        representatives = parse_representatives(response.json())
        return (representatives, Usage(civic_requests=1))


def _error_message(response: httpx.Response) -> str:
    """Pull the API's own error message out of a failed response, if it has one."""
    fallback = "Failed to fetch representatives"
    try:
        body = response.json()
    except ValueError:
        return fallback
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return fallback
