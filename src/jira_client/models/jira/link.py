"""
Jira link models.

This module provides Pydantic models for issue link types and remote links.
Issue links themselves live next to the issue model because they embed issues.
"""

import logging
from typing import Any, ClassVar

from ..base import JiraResource
from ..fields import ApiField, get_boolean, get_map, get_string

logger = logging.getLogger(__name__)


class JiraIssueLinkType(JiraResource):
    """
    Model representing a type of link between issues, e.g. "Blocks".
    """

    name: str | None = None
    inward: str | None = None
    outward: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "inward": ApiField("inward", get_string),
        "outward": ApiField("outward", get_string),
    }


class JiraRemoteLink(JiraResource):
    """
    Model representing a link from an issue to an external resource.
    """

    global_id: str | None = None
    relationship: str | None = None
    url: str | None = None
    title: str | None = None
    summary: str | None = None
    icon: dict[str, Any] | None = None
    resolved: bool = False
    application: dict[str, Any] | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "global_id": ApiField("globalId", get_string),
        "relationship": ApiField("relationship", get_string),
        "url": ApiField("object.url", get_string),
        "title": ApiField("object.title", get_string),
        "summary": ApiField("object.summary", get_string),
        "icon": ApiField("object.icon", get_map),
        "resolved": ApiField("object.status.resolved", get_boolean),
        "application": ApiField("application", get_map),
    }
