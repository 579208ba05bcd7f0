"""
Pydantic models for Jira API responses.

This package provides type-safe models for working with Jira API data,
the field coercion layer they are built on, and simplified dictionaries
for display.
"""

from .base import ApiModel, JiraResource
from .fields import ApiField, FieldOperation, ValueTuple, ValueType, to_json
from .jira import (
    JiraAttachment,
    JiraBoard,
    JiraChangelog,
    JiraChangelogItem,
    JiraComment,
    JiraComponent,
    JiraEpic,
    JiraFilter,
    JiraIssue,
    JiraIssueLink,
    JiraIssueLinkType,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraProjectCategory,
    JiraRemoteLink,
    JiraResolution,
    JiraSearchResult,
    JiraSecurityLevel,
    JiraSprint,
    JiraStatus,
    JiraStatusCategory,
    JiraTimetracking,
    JiraTransition,
    JiraUser,
    JiraVersion,
    JiraVisibility,
    JiraVotes,
    JiraWatches,
    JiraWorklog,
)

__all__ = [
    # Base models
    "ApiModel",
    "JiraResource",
    # Field coercion
    "ApiField",
    "FieldOperation",
    "ValueTuple",
    "ValueType",
    "to_json",
    # Jira models
    "JiraAttachment",
    "JiraBoard",
    "JiraChangelog",
    "JiraChangelogItem",
    "JiraComment",
    "JiraComponent",
    "JiraEpic",
    "JiraFilter",
    "JiraIssue",
    "JiraIssueLink",
    "JiraIssueLinkType",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    "JiraProjectCategory",
    "JiraRemoteLink",
    "JiraResolution",
    "JiraSearchResult",
    "JiraSecurityLevel",
    "JiraSprint",
    "JiraStatus",
    "JiraStatusCategory",
    "JiraTimetracking",
    "JiraTransition",
    "JiraUser",
    "JiraVersion",
    "JiraVisibility",
    "JiraVotes",
    "JiraWatches",
    "JiraWorklog",
]
