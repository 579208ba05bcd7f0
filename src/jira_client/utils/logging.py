"""Logging utilities for the Jira client.

This module configures the root handler used by the command line entry
point and provides helpers to log configuration without leaking secrets.
Importing the library never installs handlers.
"""

import logging
from urllib.parse import urlparse


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure jira-client logging with a single stream handler.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured logger instance
    """
    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for logger_name in ("jira-client", "atlassian"):
        logging.getLogger(logger_name).setLevel(level)

    return logging.getLogger("jira-client")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Hide all but the first and last ``keep_chars`` characters of a secret."""
    if not value:
        return "Not Provided"
    hidden = len(value) - 2 * keep_chars
    if hidden <= 0:
        return "*" * len(value)
    return value[:keep_chars] + "*" * hidden + value[-keep_chars:]


def mask_url_credentials(url: str) -> str:
    """Replace the password of a ``user:password@host`` URL with asterisks."""
    parsed = urlparse(url)
    if not parsed.password:
        return url
    netloc = parsed.netloc.replace(f":{parsed.password}@", ":****@", 1)
    return parsed._replace(netloc=netloc).geturl()


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | bool | None,
    sensitive: bool = False,
) -> None:
    """Log one connection setting at INFO level.

    Sensitive values are masked and passwords embedded in URLs (such as
    proxy URLs) are hidden.

    Args:
        logger: The logger to use
        param: The setting name, e.g. "URL"
        value: The setting value
        sensitive: Whether the whole value is a secret
    """
    if isinstance(value, bool):
        shown = str(value)
    elif sensitive:
        shown = mask_sensitive(value)
    else:
        shown = mask_url_credentials(value) if value else "Not Provided"
    logger.info(f"Jira {param}: {shown}")
