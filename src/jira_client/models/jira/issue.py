"""
Jira issue models.

This module provides Pydantic models for Jira issues and the links
between them.
"""

import logging
from datetime import date, datetime
from typing import Any, ClassVar

from pydantic import Field

from ..base import JiraResource
from ..fields import (
    ApiField,
    get_date,
    get_datetime,
    get_integer,
    get_map,
    get_string,
    get_string_array,
    resource,
    resource_array,
)
from .changelog import JiraChangelog
from .comment import JiraComment
from .common import (
    JiraAttachment,
    JiraIssueType,
    JiraPriority,
    JiraResolution,
    JiraSecurityLevel,
    JiraStatus,
    JiraTimetracking,
    JiraUser,
    JiraVotes,
    JiraWatches,
)
from .link import JiraIssueLinkType
from .project import JiraComponent, JiraProject, JiraVersion
from .worklog import JiraWorklog

logger = logging.getLogger(__name__)


class JiraIssue(JiraResource):
    """
    Model representing a Jira issue.

    The typed attributes cover the system fields. Every field the server
    returned, including custom fields, stays available through
    :meth:`get_field`.
    """

    key: str | None = None
    summary: str | None = None
    description: str | None = None
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    priority: JiraPriority | None = None
    resolution: JiraResolution | None = None
    security: JiraSecurityLevel | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    project: JiraProject | None = None
    labels: list[str] = Field(default_factory=list)
    components: list[JiraComponent] = Field(default_factory=list)
    fix_versions: list[JiraVersion] = Field(default_factory=list)
    versions: list[JiraVersion] = Field(default_factory=list)
    created: datetime | None = None
    updated: datetime | None = None
    resolution_date: datetime | None = None
    due_date: date | None = None
    time_estimate: int | None = None
    time_spent: int | None = None
    timetracking: JiraTimetracking | None = None
    comments: list[JiraComment] = Field(default_factory=list)
    worklogs: list[JiraWorklog] = Field(default_factory=list)
    attachments: list[JiraAttachment] = Field(default_factory=list)
    issue_links: list["JiraIssueLink"] = Field(default_factory=list)
    parent: "JiraIssue | None" = None
    subtasks: list["JiraIssue"] = Field(default_factory=list)
    votes: JiraVotes | None = None
    watches: JiraWatches | None = None
    changelog: list[JiraChangelog] = Field(default_factory=list)
    fields: dict[str, Any] | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "key": ApiField("key", get_string),
        "summary": ApiField("fields.summary", get_string),
        "description": ApiField("fields.description", get_string),
        "status": ApiField("fields.status", resource(JiraStatus)),
        "issue_type": ApiField("fields.issuetype", resource(JiraIssueType)),
        "priority": ApiField("fields.priority", resource(JiraPriority)),
        "resolution": ApiField("fields.resolution", resource(JiraResolution)),
        "security": ApiField("fields.security", resource(JiraSecurityLevel)),
        "assignee": ApiField("fields.assignee", resource(JiraUser)),
        "reporter": ApiField("fields.reporter", resource(JiraUser)),
        "project": ApiField("fields.project", resource(JiraProject)),
        "labels": ApiField("fields.labels", get_string_array),
        "components": ApiField("fields.components", resource_array(JiraComponent)),
        "fix_versions": ApiField("fields.fixVersions", resource_array(JiraVersion)),
        "versions": ApiField("fields.versions", resource_array(JiraVersion)),
        "created": ApiField("fields.created", get_datetime),
        "updated": ApiField("fields.updated", get_datetime),
        "resolution_date": ApiField("fields.resolutiondate", get_datetime),
        "due_date": ApiField("fields.duedate", get_date),
        "time_estimate": ApiField("fields.timeestimate", get_integer),
        "time_spent": ApiField("fields.timespent", get_integer),
        "timetracking": ApiField("fields.timetracking", resource(JiraTimetracking)),
        "comments": ApiField("fields.comment.comments", resource_array(JiraComment)),
        "worklogs": ApiField("fields.worklog.worklogs", resource_array(JiraWorklog)),
        "attachments": ApiField("fields.attachment", resource_array(JiraAttachment)),
        "issue_links": ApiField(
            "fields.issuelinks", resource_array(lambda: JiraIssueLink)
        ),
        "parent": ApiField("fields.parent", resource(lambda: JiraIssue)),
        "subtasks": ApiField("fields.subtasks", resource_array(lambda: JiraIssue)),
        "votes": ApiField("fields.votes", resource(JiraVotes)),
        "watches": ApiField("fields.watches", resource(JiraWatches)),
        "changelog": ApiField("changelog.histories", resource_array(JiraChangelog)),
        "fields": ApiField("fields", get_map),
    }

    def get_field(self, name: str) -> Any:
        """
        Get the raw JSON value of any field, including custom fields.

        Args:
            name: The field id, e.g. ``customfield_10010``

        Returns:
            The raw value, or None if the field was not returned
        """
        if not self.fields:
            return None
        return self.fields.get(name)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
            "description": self.description,
            "labels": self.labels,
        }
        if self.status:
            result["status"] = self.status.name
        if self.issue_type:
            result["issue_type"] = self.issue_type.name
        if self.priority:
            result["priority"] = self.priority.name
        if self.assignee:
            result["assignee"] = self.assignee.to_simplified_dict()
        if self.reporter:
            result["reporter"] = self.reporter.to_simplified_dict()
        if self.created:
            result["created"] = self.created.isoformat()
        if self.updated:
            result["updated"] = self.updated.isoformat()
        if self.parent:
            result["parent"] = self.parent.key
        if self.subtasks:
            result["subtasks"] = [subtask.key for subtask in self.subtasks]
        return {k: v for k, v in result.items() if v is not None}


class JiraIssueLink(JiraResource):
    """
    Model representing a link between two issues.

    Only one of ``inward_issue`` and ``outward_issue`` is set, depending
    on the direction of the link as seen from the issue that holds it.
    """

    type: JiraIssueLinkType | None = None
    inward_issue: JiraIssue | None = None
    outward_issue: JiraIssue | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "type": ApiField("type", resource(JiraIssueLinkType)),
        "inward_issue": ApiField("inwardIssue", resource(JiraIssue)),
        "outward_issue": ApiField("outwardIssue", resource(JiraIssue)),
    }


JiraIssue.model_rebuild()
JiraIssueLink.model_rebuild()
