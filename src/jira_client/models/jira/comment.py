"""
Jira comment models.

This module provides Pydantic models for Jira issue comments.
"""

import logging
from datetime import datetime
from typing import ClassVar

from ..base import JiraResource
from ..fields import ApiField, get_datetime, get_string, resource
from .common import JiraUser, JiraVisibility, dump_visibility

logger = logging.getLogger(__name__)


class JiraComment(JiraResource):
    """
    Model representing a Jira issue comment.
    """

    body: str | None = None
    author: JiraUser | None = None
    update_author: JiraUser | None = None
    created: datetime | None = None
    updated: datetime | None = None
    visibility: JiraVisibility | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "body": ApiField("body", get_string, writable=True),
        "author": ApiField("author", resource(JiraUser)),
        "update_author": ApiField("updateAuthor", resource(JiraUser)),
        "created": ApiField("created", get_datetime),
        "updated": ApiField("updated", get_datetime),
        "visibility": ApiField(
            "visibility",
            resource(JiraVisibility),
            writable=True,
            dump=dump_visibility,
        ),
    }
