"""Shared configuration, logging and error types for manuscript-hub."""

from manuscript_hub_common.config import Settings, get_settings
from manuscript_hub_common.errors import APIError, ManuscriptHubError
from manuscript_hub_common.logging_config import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "ManuscriptHubError",
    "APIError",
    "configure_logging",
    "get_logger",
]
