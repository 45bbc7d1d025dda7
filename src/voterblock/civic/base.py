from typing import Protocol

from voterblock.data import Address, Representative, Usage


class CivicAPIError(Exception):
    """The civic information service rejected or failed a lookup."""


class RepresentativeLookup(Protocol):
    """Interface for resolving an address to its elected officials."""

    async def lookup(self, address: Address) -> tuple[list[Representative], Usage]:
        """Look up representatives for an address.

        Args:
            address: The civic address to resolve.

        Returns:
            Tuple of (representatives, usage).
        """
        ...
