"""Pydantic configuration models for VoterBlock components."""

from typing import Literal

from pydantic import BaseModel, Field

# ============================================================
# News Searcher Configs
# ============================================================


class ClaudeNewsSearcherConfig(BaseModel):
    """Configuration for ClaudeNewsSearcher."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    max_searches: int = Field(default=3, ge=1)
    max_tokens: int = Field(default=2048, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Civic Client Configs
# ============================================================


class GoogleCivicClientConfig(BaseModel):
    """Configuration for GoogleCivicClient."""

    type: Literal["google"] = "google"
    api_url: str = "https://www.googleapis.com/civicinfo/v2/representatives"
    levels: tuple[str, ...] = (
        "country",
        "administrativeArea1",
        "administrativeArea2",
        "locality",
    )
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-lookup JSON run logs."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class VoterBlockConfig(BaseModel):
    """Root configuration for VoterBlock."""

    news: ClaudeNewsSearcherConfig = Field(default_factory=ClaudeNewsSearcherConfig)
    civic: GoogleCivicClientConfig = Field(default_factory=GoogleCivicClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
