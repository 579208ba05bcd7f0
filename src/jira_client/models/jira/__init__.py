"""
Jira data models.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .agile import JiraBoard, JiraEpic, JiraSprint
from .changelog import JiraChangelog, JiraChangelogItem
from .comment import JiraComment
from .common import (
    JiraAttachment,
    JiraIssueType,
    JiraPriority,
    JiraResolution,
    JiraSecurityLevel,
    JiraStatus,
    JiraStatusCategory,
    JiraTimetracking,
    JiraUser,
    JiraVisibility,
    JiraVotes,
    JiraWatches,
)
from .filter import JiraFilter
from .issue import JiraIssue, JiraIssueLink
from .link import JiraIssueLinkType, JiraRemoteLink
from .project import JiraComponent, JiraProject, JiraProjectCategory, JiraVersion
from .search import JiraSearchResult
from .workflow import JiraTransition
from .worklog import JiraWorklog

__all__ = [
    # Common models
    "JiraUser",
    "JiraStatusCategory",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    "JiraResolution",
    "JiraSecurityLevel",
    "JiraVisibility",
    "JiraAttachment",
    "JiraTimetracking",
    "JiraVotes",
    "JiraWatches",
    # Entity-specific models
    "JiraComment",
    "JiraWorklog",
    "JiraProject",
    "JiraProjectCategory",
    "JiraComponent",
    "JiraVersion",
    "JiraTransition",
    "JiraChangelog",
    "JiraChangelogItem",
    "JiraFilter",
    "JiraBoard",
    "JiraSprint",
    "JiraEpic",
    "JiraIssue",
    "JiraIssueLink",
    "JiraIssueLinkType",
    "JiraRemoteLink",
    "JiraSearchResult",
]
