"""Core data models for VoterBlock."""

from dataclasses import dataclass, field
from enum import StrEnum


class GovernmentLevel(StrEnum):
    """Government tier a representative's office belongs to.

    Declaration order is the order results are grouped and displayed in.
    """

    FEDERAL = "federal"
    STATE = "state"
    COUNTY = "county"
    LOCAL = "local"
    OTHER = "other"


@dataclass(frozen=True)
class Address:
    """A civic address to resolve to elected officials."""

    street: str
    city: str
    state: str
    zip_code: str

    def formatted(self) -> str:
        """Render the address as a single line for the civic lookup."""
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}"


@dataclass(frozen=True)
class NewsArticle:
    """A news article extracted from a search-augmented model response."""

    title: str
    url: str = ""
    date: str = ""
    source: str = ""
    snippet: str = ""


@dataclass(frozen=True)
class Representative:
    """An elected official holding an office for a division."""

    name: str
    office: str
    level: GovernmentLevel
    division_id: str
    party: str | None = None
    phones: tuple[str, ...] = ()
    urls: tuple[str, ...] = ()
    emails: tuple[str, ...] = ()


@dataclass(frozen=True)
class APICallUsage:
    """Usage from a single model API call."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0
    web_searches: int = 0


@dataclass
class Usage:
    """Accumulated external API usage across lookups."""

    api_calls: list[APICallUsage] = field(default_factory=list)
    civic_requests: int = 0

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    @property
    def web_searches(self) -> int:
        return sum(c.web_searches for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(
            api_calls=self.api_calls + other.api_calls,
            civic_requests=self.civic_requests + other.civic_requests,
        )

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        self.civic_requests += other.civic_requests
        return self
