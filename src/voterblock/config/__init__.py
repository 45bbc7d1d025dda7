"""Configuration module for VoterBlock."""

from voterblock.config.factory import create_from_config
from voterblock.config.loader import get_default_config_path, load_config
from voterblock.config.models import (
    ClaudeNewsSearcherConfig,
    GoogleCivicClientConfig,
    LoggingConfig,
    VoterBlockConfig,
)

__all__ = [
    "ClaudeNewsSearcherConfig",
    "GoogleCivicClientConfig",
    "LoggingConfig",
    "VoterBlockConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
