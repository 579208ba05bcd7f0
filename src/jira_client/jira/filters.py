"""Module for Jira saved filter operations."""

import logging
from collections.abc import Iterable

from ..exceptions import JiraOperationError
from ..models.jira import JiraFilter
from .search import IssueIterator, SearchMixin

logger = logging.getLogger("jira-client")


class FiltersMixin(SearchMixin):
    """Mixin for Jira saved filter operations."""

    def get_filter(self, filter_id: str) -> JiraFilter:
        """
        Get a saved filter by id.

        Args:
            filter_id: The filter id

        Returns:
            JiraFilter model including its JQL
        """
        return self._get_resource(
            JiraFilter, self._api("filter", filter_id), f"retrieve filter {filter_id}"
        )

    def iter_filter_issues(
        self,
        filter_id: str,
        fields: str | Iterable[str] | None = None,
        max_results: int | None = None,
    ) -> IssueIterator:
        """
        Lazily iterate over the issues matched by a saved filter.

        Args:
            filter_id: The filter id
            fields: Fields to return
            max_results: Page size to request

        Returns:
            A single-pass IssueIterator over the filter's JQL
        """
        saved = self.get_filter(filter_id)
        if not saved.jql:
            raise JiraOperationError(f"Filter {filter_id} has no JQL")
        return self.iter_issues(saved.jql, fields=fields, max_results=max_results)
