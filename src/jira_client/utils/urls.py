"""URL-related utility functions."""

import re
from urllib.parse import urlparse


def is_atlassian_cloud_url(url: str) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Localhost and private network addresses are always Server/Data Center
    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        ".atlassian.net" in hostname
        or ".jira.com" in hostname
        or ".jira-dev.com" in hostname
    )


def join_path(*parts: str | int) -> str:
    """Join REST path segments with single slashes.

    Args:
        parts: Path segments, e.g. ``("rest/api/2", "issue", "PROJ-1")``

    Returns:
        The joined path without leading or trailing slashes
    """
    return "/".join(str(part).strip("/") for part in parts if str(part).strip("/"))
