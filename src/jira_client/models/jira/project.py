"""
Jira project models.

This module provides Pydantic models for Jira projects, project categories,
components, and versions.
"""

import logging
from datetime import date
from typing import Any, ClassVar

from pydantic import Field

from ..base import JiraResource
from ..fields import (
    ApiField,
    format_date,
    get_boolean,
    get_date,
    get_integer,
    get_map,
    get_string,
    resource,
    resource_array,
)
from .common import JiraIssueType, JiraUser

logger = logging.getLogger(__name__)


class JiraProjectCategory(JiraResource):
    """
    Model representing a Jira project category.
    """

    name: str | None = None
    description: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "description": ApiField("description", get_string),
    }


class JiraComponent(JiraResource):
    """
    Model representing a project component.
    """

    name: str | None = None
    description: str | None = None
    project: str | None = None
    project_id: int | None = None
    lead: JiraUser | None = None
    assignee_type: str | None = None
    is_assignee_type_valid: bool = False

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string, writable=True),
        "description": ApiField("description", get_string, writable=True),
        "project": ApiField("project", get_string, writable=True),
        "project_id": ApiField("projectId", get_integer, writable=True),
        "lead": ApiField("lead", resource(JiraUser)),
        "assignee_type": ApiField("assigneeType", get_string, writable=True),
        "is_assignee_type_valid": ApiField("isAssigneeTypeValid", get_boolean),
    }


class JiraVersion(JiraResource):
    """
    Model representing a project version (fix version / affects version).
    """

    name: str | None = None
    description: str | None = None
    archived: bool = False
    released: bool = False
    release_date: date | None = None
    project: str | None = None
    project_id: int | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string, writable=True),
        "description": ApiField("description", get_string, writable=True),
        "archived": ApiField("archived", get_boolean, writable=True),
        "released": ApiField("released", get_boolean, writable=True),
        "release_date": ApiField(
            "releaseDate", get_date, writable=True, dump=format_date
        ),
        "project": ApiField("project", get_string, writable=True),
        "project_id": ApiField("projectId", get_integer, writable=True),
    }


class JiraProject(JiraResource):
    """
    Model representing a Jira project.
    """

    key: str | None = None
    name: str | None = None
    description: str | None = None
    lead: JiraUser | None = None
    assignee_type: str | None = None
    email: str | None = None
    url: str | None = None
    avatar_urls: dict[str, Any] | None = None
    category: JiraProjectCategory | None = None
    issue_types: list[JiraIssueType] = Field(default_factory=list)
    components: list[JiraComponent] = Field(default_factory=list)
    versions: list[JiraVersion] = Field(default_factory=list)
    roles: dict[str, Any] | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "key": ApiField("key", get_string),
        "name": ApiField("name", get_string),
        "description": ApiField("description", get_string),
        "lead": ApiField("lead", resource(JiraUser)),
        "assignee_type": ApiField("assigneeType", get_string),
        "email": ApiField("email", get_string),
        "url": ApiField("url", get_string),
        "avatar_urls": ApiField("avatarUrls", get_map),
        "category": ApiField("projectCategory", resource(JiraProjectCategory)),
        "issue_types": ApiField("issueTypes", resource_array(JiraIssueType)),
        "components": ApiField("components", resource_array(JiraComponent)),
        "versions": ApiField("versions", resource_array(JiraVersion)),
        "roles": ApiField("roles", get_map),
    }

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "key": self.key,
            "name": self.name,
            "description": self.description,
        }
        if self.lead:
            result["lead"] = self.lead.to_simplified_dict()
        if self.category:
            result["category"] = self.category.name
        return {k: v for k, v in result.items() if v is not None}
