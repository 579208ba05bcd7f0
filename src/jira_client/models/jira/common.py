"""
Common Jira entity models.

This module provides Pydantic models for common Jira entities like users, statuses,
issue types, priorities, attachments, and time tracking.
"""

import logging
from datetime import datetime
from typing import Any, ClassVar

from ..base import ApiModel, JiraResource
from ..fields import (
    ApiField,
    get_boolean,
    get_datetime,
    get_integer,
    get_map,
    get_string,
    resource,
)

logger = logging.getLogger(__name__)


class JiraUser(JiraResource):
    """
    Model representing a Jira user.

    Server/Data Center identifies users by ``name``; Cloud uses ``accountId``.
    """

    name: str | None = None
    key: str | None = None
    account_id: str | None = None
    display_name: str | None = None
    email: str | None = None
    active: bool = False
    time_zone: str | None = None
    avatar_urls: dict[str, Any] | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "key": ApiField("key", get_string),
        "account_id": ApiField("accountId", get_string),
        "display_name": ApiField("displayName", get_string),
        "email": ApiField("emailAddress", get_string),
        "active": ApiField("active", get_boolean),
        "time_zone": ApiField("timeZone", get_string),
        "avatar_urls": ApiField("avatarUrls", get_map),
    }

    @property
    def avatar_url(self) -> str | None:
        """The largest available avatar (48x48)."""
        if not self.avatar_urls:
            return None
        return get_string(self.avatar_urls.get("48x48"))

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result = {
            "name": self.name,
            "display_name": self.display_name,
            "email": self.email,
            "account_id": self.account_id,
        }
        return {k: v for k, v in result.items() if v is not None}


class JiraStatusCategory(JiraResource):
    """
    Model representing a Jira status category.
    """

    key: str | None = None
    name: str | None = None
    color_name: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "key": ApiField("key", get_string),
        "name": ApiField("name", get_string),
        "color_name": ApiField("colorName", get_string),
    }


class JiraStatus(JiraResource):
    """
    Model representing a Jira issue status.
    """

    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    category: JiraStatusCategory | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "description": ApiField("description", get_string),
        "icon_url": ApiField("iconUrl", get_string),
        "category": ApiField("statusCategory", resource(JiraStatusCategory)),
    }


class JiraIssueType(JiraResource):
    """
    Model representing a Jira issue type.

    When read from create metadata, ``fields`` holds the field descriptions
    available for this type.
    """

    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    subtask: bool = False
    fields: dict[str, Any] | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "description": ApiField("description", get_string),
        "icon_url": ApiField("iconUrl", get_string),
        "subtask": ApiField("subtask", get_boolean),
        "fields": ApiField("fields", get_map),
    }


class JiraPriority(JiraResource):
    """
    Model representing a Jira priority.
    """

    name: str | None = None
    description: str | None = None
    icon_url: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "description": ApiField("description", get_string),
        "icon_url": ApiField("iconUrl", get_string),
    }


class JiraResolution(JiraResource):
    """
    Model representing a Jira issue resolution.
    """

    name: str | None = None
    description: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "description": ApiField("description", get_string),
    }


class JiraSecurityLevel(JiraResource):
    """
    Model representing an issue security level.
    """

    name: str | None = None
    description: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "description": ApiField("description", get_string),
    }


class JiraVisibility(ApiModel):
    """
    Restricts who can see a comment or worklog, by group or by role.
    """

    type: str | None = None
    value: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "type": ApiField("type", get_string, writable=True),
        "value": ApiField("value", get_string, writable=True),
    }


def dump_visibility(visibility: JiraVisibility) -> dict[str, Any]:
    return visibility.to_api_dict()


class JiraAttachment(JiraResource):
    """
    Model representing a Jira attachment.
    """

    filename: str | None = None
    author: JiraUser | None = None
    created: datetime | None = None
    size: int | None = None
    mime_type: str | None = None
    content_url: str | None = None
    thumbnail_url: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "filename": ApiField("filename", get_string),
        "author": ApiField("author", resource(JiraUser)),
        "created": ApiField("created", get_datetime),
        "size": ApiField("size", get_integer),
        "mime_type": ApiField("mimeType", get_string),
        "content_url": ApiField("content", get_string),
        "thumbnail_url": ApiField("thumbnail", get_string),
    }


class JiraTimetracking(ApiModel):
    """
    Model representing Jira time tracking data.

    Estimates are writable; the time spent is derived from worklogs.
    """

    original_estimate: str | None = None
    remaining_estimate: str | None = None
    time_spent: str | None = None
    original_estimate_seconds: int | None = None
    remaining_estimate_seconds: int | None = None
    time_spent_seconds: int | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "original_estimate": ApiField("originalEstimate", get_string, writable=True),
        "remaining_estimate": ApiField(
            "remainingEstimate", get_string, writable=True
        ),
        "time_spent": ApiField("timeSpent", get_string),
        "original_estimate_seconds": ApiField(
            "originalEstimateSeconds", get_integer, writable=True
        ),
        "remaining_estimate_seconds": ApiField(
            "remainingEstimateSeconds", get_integer, writable=True
        ),
        "time_spent_seconds": ApiField("timeSpentSeconds", get_integer),
    }


class JiraVotes(JiraResource):
    """
    Vote summary of an issue.
    """

    votes: int | None = None
    has_voted: bool = False

    api_fields: ClassVar[dict[str, ApiField]] = {
        "votes": ApiField("votes", get_integer),
        "has_voted": ApiField("hasVoted", get_boolean),
    }


class JiraWatches(JiraResource):
    """
    Watcher summary of an issue.
    """

    watch_count: int | None = None
    is_watching: bool = False

    api_fields: ClassVar[dict[str, ApiField]] = {
        "watch_count": ApiField("watchCount", get_integer),
        "is_watching": ApiField("isWatching", get_boolean),
    }
