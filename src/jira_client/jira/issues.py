"""Module for Jira issue operations."""

import logging
from collections.abc import Iterable

from ..models.jira import JiraIssue
from .builders import IssueCreateBuilder, IssueUpdateBuilder
from .constants import SUBTASK_ISSUE_TYPE
from .fields import FieldsMixin
from .utils import join_param

logger = logging.getLogger("jira-client")


class IssuesMixin(FieldsMixin):
    """Mixin for Jira issue operations."""

    def get_issue(
        self,
        issue_key: str,
        fields: str | Iterable[str] | None = None,
        expand: str | Iterable[str] | None = None,
    ) -> JiraIssue:
        """
        Get a Jira issue by key or id.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123') or numeric id
            fields: Fields to return (comma-separated string or list), or all if None
            expand: Optional items to expand, e.g. "changelog"

        Returns:
            JiraIssue model

        Raises:
            JiraOperationError: If the issue cannot be retrieved
        """
        params = {}
        if fields_param := join_param(fields):
            params["fields"] = fields_param
        if expand_param := join_param(expand):
            params["expand"] = expand_param

        return self._get_resource(
            JiraIssue,
            self._api("issue", issue_key),
            f"retrieve issue {issue_key}",
            params=params or None,
        )

    def refresh_issue(
        self, issue: JiraIssue, fields: str | Iterable[str] | None = None
    ) -> JiraIssue:
        """
        Fetch a fresh snapshot of an issue.

        Args:
            issue: The issue to re-read
            fields: Fields to return, or all if None

        Returns:
            A new JiraIssue; the given instance is left untouched
        """
        return self.get_issue(str(issue.key or issue.id), fields=fields)

    def create_issue(self, project_key: str, issue_type: str) -> IssueCreateBuilder:
        """
        Start building a new issue.

        The create metadata for the project and issue type is fetched now;
        nothing is written until ``execute()`` is called on the builder.

        Args:
            project_key: The project key (e.g. 'PROJ')
            issue_type: The issue type name (e.g. 'Bug')

        Returns:
            An IssueCreateBuilder with the project and issue type preset
        """
        metadata = self.get_create_metadata(project_key, issue_type)
        return (
            IssueCreateBuilder(self, metadata)
            .field("project", project_key)
            .field("issuetype", issue_type)
        )

    def create_subtask(self, parent: JiraIssue) -> IssueCreateBuilder:
        """
        Start building a sub-task of an existing issue.

        Args:
            parent: The parent issue; it must include its project

        Returns:
            An IssueCreateBuilder with project, issue type and parent preset

        Raises:
            ValueError: If the parent issue has no project
        """
        if parent.project is None or not parent.project.key:
            raise ValueError("Parent issue must include its project to add a sub-task")
        return self.create_issue(parent.project.key, SUBTASK_ISSUE_TYPE).field(
            "parent", parent.key
        )

    def update_issue(self, issue_key: str) -> IssueUpdateBuilder:
        """
        Start building an update for an issue.

        The edit metadata is fetched now; nothing is written until
        ``execute()`` is called on the builder.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            An IssueUpdateBuilder
        """
        metadata = self.get_edit_metadata(issue_key)
        return IssueUpdateBuilder(self, issue_key, metadata)

    def delete_issue(self, issue_key: str, delete_subtasks: bool = False) -> None:
        """
        Delete an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            delete_subtasks: Whether sub-tasks are deleted as well; Jira
                refuses to delete an issue with sub-tasks otherwise
        """
        self._request(
            "delete",
            self._api("issue", issue_key),
            f"delete issue {issue_key}",
            params={"deleteSubtasks": "true" if delete_subtasks else "false"},
            expect=None,
        )
        logger.info(f"Deleted issue {issue_key}")

    def vote(self, issue_key: str) -> None:
        """Cast the current user's vote for an issue."""
        self._request(
            "post",
            self._api("issue", issue_key, "votes"),
            f"vote for issue {issue_key}",
            expect=None,
        )

    def unvote(self, issue_key: str) -> None:
        """Remove the current user's vote from an issue."""
        self._request(
            "delete",
            self._api("issue", issue_key, "votes"),
            f"remove vote from issue {issue_key}",
            expect=None,
        )

    def add_watcher(self, issue_key: str, username: str) -> None:
        """
        Add a watcher to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            username: Username (Server/DC) or account id (Cloud) of the watcher
        """
        self._request(
            "post",
            self._api("issue", issue_key, "watchers"),
            f"add watcher {username} to issue {issue_key}",
            data=username,
            expect=None,
        )

    def delete_watcher(self, issue_key: str, username: str) -> None:
        """
        Remove a watcher from an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            username: Username (Server/DC) or account id (Cloud) of the watcher
        """
        param = "accountId" if self.config.is_cloud else "username"
        self._request(
            "delete",
            self._api("issue", issue_key, "watchers"),
            f"remove watcher {username} from issue {issue_key}",
            params={param: username},
            expect=None,
        )
