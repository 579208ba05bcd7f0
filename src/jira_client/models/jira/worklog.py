"""
Jira worklog models.

This module provides Pydantic models for Jira worklogs.
"""

import logging
from datetime import datetime
from typing import ClassVar

from ..base import JiraResource
from ..fields import (
    ApiField,
    format_datetime,
    get_datetime,
    get_integer,
    get_string,
    resource,
)
from .common import JiraUser, JiraVisibility, dump_visibility

logger = logging.getLogger(__name__)


class JiraWorklog(JiraResource):
    """
    Model representing a Jira worklog entry.

    ``time_spent_seconds`` is None when the server omits it, so a missing
    value is never mistaken for zero logged time.
    """

    comment: str | None = None
    author: JiraUser | None = None
    update_author: JiraUser | None = None
    created: datetime | None = None
    updated: datetime | None = None
    started: datetime | None = None
    time_spent: str | None = None
    time_spent_seconds: int | None = None
    issue_id: str | None = None
    visibility: JiraVisibility | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "comment": ApiField("comment", get_string, writable=True),
        "author": ApiField("author", resource(JiraUser)),
        "update_author": ApiField("updateAuthor", resource(JiraUser)),
        "created": ApiField("created", get_datetime),
        "updated": ApiField("updated", get_datetime),
        "started": ApiField(
            "started", get_datetime, writable=True, dump=format_datetime
        ),
        "time_spent": ApiField("timeSpent", get_string, writable=True),
        "time_spent_seconds": ApiField(
            "timeSpentSeconds", get_integer, writable=True
        ),
        "issue_id": ApiField("issueId", get_string),
        "visibility": ApiField(
            "visibility",
            resource(JiraVisibility),
            writable=True,
            dump=dump_visibility,
        ),
    }
