"""
Jira filter models.

This module provides the Pydantic model for saved JQL filters.
"""

import logging
from typing import ClassVar

from ..base import JiraResource
from ..fields import ApiField, get_boolean, get_string, resource
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraFilter(JiraResource):
    """
    Model representing a saved filter.
    """

    name: str | None = None
    description: str | None = None
    jql: str | None = None
    favourite: bool = False
    owner: JiraUser | None = None
    view_url: str | None = None
    search_url: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "description": ApiField("description", get_string),
        "jql": ApiField("jql", get_string),
        "favourite": ApiField("favourite", get_boolean),
        "owner": ApiField("owner", resource(JiraUser)),
        "view_url": ApiField("viewUrl", get_string),
        "search_url": ApiField("searchUrl", get_string),
    }
