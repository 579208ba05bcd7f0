"""Module for Jira search operations."""

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from ..models.jira import JiraIssue, JiraSearchResult
from .client import JiraClient
from .protocols import SearchPageFetcher
from .utils import join_param

logger = logging.getLogger("jira-client")


@dataclass(frozen=True)
class SearchQuery:
    """An immutable search request.

    Attributes:
        jql: JQL query string
        fields: Comma-separated fields to include, or None for the server default
        expand: Comma-separated expand directives
        max_results: Requested page size; the server may cap it lower
        start_at: Offset of the first result
    """

    jql: str
    fields: str | None = None
    expand: str | None = None
    max_results: int | None = None
    start_at: int | None = None

    def to_params(self, start_at: int) -> dict[str, Any]:
        """Build the query parameters for the page starting at ``start_at``."""
        params: dict[str, Any] = {}
        if self.jql:
            params["jql"] = self.jql
        if self.fields:
            params["fields"] = self.fields
        if self.expand:
            params["expand"] = self.expand
        if self.max_results is not None:
            params["maxResults"] = self.max_results
        params["startAt"] = start_at
        return params


class IssueIterator(Iterator[JiraIssue]):
    """
    Single-pass lazy iterator over every issue matching a query.

    One page is buffered at a time. When the buffer runs dry the next page
    is requested at ``startAt + len(issues)`` of the previous page, using
    the count actually returned rather than the requested page size. The
    iterator is done once a page comes back empty.

    Issues are yielded in server order without deduplication, so results
    can skip or repeat if the data set changes between pages. A failed
    fetch raises and leaves the iterator where it was, so calling again
    retries the same page. The iterator cannot be restarted; build a new
    one to search again.
    """

    def __init__(
        self, fetcher: SearchPageFetcher, query: SearchQuery, path: str | None = None
    ) -> None:
        self._fetcher = fetcher
        self._query = query
        self._path = path
        self._next_start = query.start_at or 0
        self._buffer: deque[JiraIssue] = deque()
        self._done = False
        self.total: int | None = None

    @property
    def query(self) -> SearchQuery:
        return self._query

    def has_next(self) -> bool:
        """
        Check whether another issue is available, fetching a page if needed.

        Calling this repeatedly without consuming an issue fetches at most once.

        Raises:
            JiraOperationError: If fetching the next page fails
        """
        if self._buffer:
            return True
        if self._done:
            return False
        self._fetch_next_page()
        return bool(self._buffer)

    def __next__(self) -> JiraIssue:
        if not self.has_next():
            raise StopIteration
        return self._buffer.popleft()

    def __iter__(self) -> "IssueIterator":
        return self

    def _fetch_next_page(self) -> None:
        page = self._fetcher.fetch_search_page(
            self._query, self._next_start, path=self._path
        )
        if not page.issues:
            logger.debug(f"Search exhausted at offset {self._next_start}")
            self._done = True
            return

        start = page.start_at if page.start_at is not None else self._next_start
        self._next_start = start + len(page.issues)
        self.total = page.total
        self._buffer.extend(page.issues)


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def fetch_search_page(
        self, query: SearchQuery, start_at: int, path: str | None = None
    ) -> JiraSearchResult:
        """
        Fetch one page of results for a query.

        Args:
            query: The search query
            start_at: Offset of the first issue on the page
            path: Endpoint returning the search envelope; defaults to ``search``

        Returns:
            The page as a JiraSearchResult

        Raises:
            JiraOperationError: If the request fails or the payload is malformed
        """
        response = self._request(
            "get",
            path or self._api("search"),
            f"search issues with JQL '{query.jql}'",
            params=query.to_params(start_at),
        )
        return JiraSearchResult.from_api_response(response)

    def search_issues(
        self,
        jql: str,
        fields: str | Iterable[str] | None = None,
        expand: str | Iterable[str] | None = None,
        max_results: int | None = None,
        start_at: int | None = None,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language) and return one page.

        Args:
            jql: JQL query string
            fields: Fields to return (comma-separated string, list, tuple, set, or "*all")
            expand: Optional items to expand
            max_results: Maximum issues to return
            start_at: Starting index

        Returns:
            JiraSearchResult object containing issues and metadata (total, start_at, max_results)

        Raises:
            JiraAuthenticationError: If authentication fails with the Jira API (401/403)
            JiraOperationError: If there is an error searching for issues
        """
        query = self._build_query(jql, fields, expand, max_results, start_at)
        return self.fetch_search_page(query, query.start_at or 0)

    def iter_issues(
        self,
        jql: str,
        fields: str | Iterable[str] | None = None,
        expand: str | Iterable[str] | None = None,
        max_results: int | None = None,
        start_at: int | None = None,
    ) -> IssueIterator:
        """
        Lazily iterate over every issue matching a JQL query.

        Pages are fetched on demand; nothing is requested until the first
        call to ``has_next()`` or ``next()``.

        Args:
            jql: JQL query string
            fields: Fields to return
            expand: Optional items to expand
            max_results: Page size to request
            start_at: Offset of the first issue

        Returns:
            A single-pass IssueIterator
        """
        query = self._build_query(jql, fields, expand, max_results, start_at)
        return IssueIterator(self, query)

    def count_issues(self, jql: str) -> int | None:
        """
        Count the issues matching a JQL query without fetching them.

        Args:
            jql: JQL query string

        Returns:
            The total reported by the server, or None if it was not reported
        """
        response = self._request(
            "get",
            self._api("search"),
            f"count issues with JQL '{jql}'",
            params={"jql": jql, "maxResults": 1},
        )
        return JiraSearchResult.from_api_response(response).total

    @staticmethod
    def _build_query(
        jql: str,
        fields: str | Iterable[str] | None,
        expand: str | Iterable[str] | None,
        max_results: int | None,
        start_at: int | None,
    ) -> SearchQuery:
        return SearchQuery(
            jql=jql,
            fields=join_param(fields),
            expand=join_param(expand),
            max_results=max_results,
            start_at=start_at,
        )
