"""
Utility functions for the Jira client.
This package provides various utility functions used throughout the codebase.
"""

from .date import parse_date
from .logging import (
    log_config_param,
    mask_sensitive,
    mask_url_credentials,
    setup_logging,
)
from .ssl import SSLIgnoreAdapter, configure_proxies, configure_ssl_verification
from .urls import is_atlassian_cloud_url, join_path

__all__ = [
    "SSLIgnoreAdapter",
    "configure_proxies",
    "configure_ssl_verification",
    "is_atlassian_cloud_url",
    "join_path",
    "log_config_param",
    "mask_sensitive",
    "mask_url_credentials",
    "parse_date",
    "setup_logging",
]
