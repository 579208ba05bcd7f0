"""Jira API module for jira_client.

This module provides the Jira client and its entity operations.
"""

# flake8: noqa

from .attachments import AttachmentsMixin
from .boards import BoardsMixin
from .builders import (
    ComponentCreateBuilder,
    IssueCreateBuilder,
    IssueTransitionBuilder,
    IssueUpdateBuilder,
    RemoteLinkBuilder,
    VersionCreateBuilder,
)
from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .fields import FieldsMixin
from .filters import FiltersMixin
from .issues import IssuesMixin
from .links import LinksMixin
from .metadata import MetadataMixin
from .projects import ProjectsMixin
from .search import IssueIterator, SearchMixin, SearchQuery
from .sprints import SprintsMixin
from .transitions import TransitionsMixin
from .users import UsersMixin
from .utils import format_duration_from_seconds
from .worklog import WorklogMixin


class JiraFetcher(
    IssuesMixin,
    FieldsMixin,
    TransitionsMixin,
    CommentsMixin,
    WorklogMixin,
    LinksMixin,
    AttachmentsMixin,
    ProjectsMixin,
    UsersMixin,
    MetadataMixin,
    FiltersMixin,
    SprintsMixin,
    SearchMixin,
    BoardsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Issue read, create, update, delete, votes and watchers
    - FieldsMixin: Field definitions and create/edit metadata
    - TransitionsMixin: Workflow transitions
    - CommentsMixin: Comment operations
    - WorklogMixin: Worklog operations
    - LinksMixin: Issue links, link types and remote links
    - AttachmentsMixin: Attachment upload, download and removal
    - ProjectsMixin: Projects, components and versions
    - UsersMixin: User operations
    - MetadataMixin: Statuses, issue types, priorities, resolutions, security levels
    - FiltersMixin: Saved filters
    - SprintsMixin: Sprints and epics
    - SearchMixin: JQL search and lazy issue iteration
    - BoardsMixin: Board operations
    """

    pass


__all__ = [
    "JiraFetcher",
    "JiraConfig",
    "JiraClient",
    "IssueIterator",
    "SearchQuery",
    "IssueCreateBuilder",
    "IssueUpdateBuilder",
    "IssueTransitionBuilder",
    "RemoteLinkBuilder",
    "ComponentCreateBuilder",
    "VersionCreateBuilder",
    "format_duration_from_seconds",
]
