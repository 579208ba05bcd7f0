"""Module for Jira sprints and epics operations."""

import logging
from collections.abc import Iterable

from ..models.jira import JiraEpic, JiraSprint
from .search import IssueIterator, SearchMixin, SearchQuery
from .utils import join_param

logger = logging.getLogger("jira-client")


class SprintsMixin(SearchMixin):
    """Mixin for Jira sprints and epics operations."""

    def get_sprint(self, sprint_id: int | str) -> JiraSprint:
        """
        Get a sprint by id.

        Args:
            sprint_id: The sprint id

        Returns:
            JiraSprint model
        """
        return self._get_resource(
            JiraSprint, self._agile("sprint", sprint_id), f"retrieve sprint {sprint_id}"
        )

    def get_board_sprints(
        self, board_id: int | str, state: str | None = None
    ) -> list[JiraSprint]:
        """
        Get all sprints of a board.

        Args:
            board_id: Board id
            state: Sprint state (e.g., active, future, closed) if None, return all state sprints

        Returns:
            List of JiraSprint models across all pages
        """
        params = {"state": state} if state else None
        return self._get_all_values(
            JiraSprint,
            self._agile("board", board_id, "sprint"),
            f"retrieve sprints for board {board_id}",
            params=params,
        )

    def iter_sprint_issues(
        self,
        sprint_id: int | str,
        jql: str = "",
        fields: str | Iterable[str] | None = None,
        max_results: int | None = None,
    ) -> IssueIterator:
        """
        Lazily iterate over the issues of a sprint.

        Args:
            sprint_id: The sprint id
            jql: Optional JQL to narrow the issues further
            fields: Fields to return
            max_results: Page size to request

        Returns:
            A single-pass IssueIterator
        """
        query = SearchQuery(
            jql=jql, fields=join_param(fields), max_results=max_results
        )
        return IssueIterator(self, query, path=self._agile("sprint", sprint_id, "issue"))

    def get_epic(self, epic_id: int | str) -> JiraEpic:
        """
        Get an epic by id or key.

        Args:
            epic_id: The epic id or issue key

        Returns:
            JiraEpic model
        """
        return self._get_resource(
            JiraEpic, self._agile("epic", epic_id), f"retrieve epic {epic_id}"
        )
