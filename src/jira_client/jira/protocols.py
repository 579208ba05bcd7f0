"""Module for Jira protocol definitions."""

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..models.jira import JiraSearchResult
    from .search import SearchQuery


@runtime_checkable
class JiraTransport(Protocol):
    """Protocol for the HTTP collaborator that performs the actual calls.

    ``atlassian.Jira`` satisfies this protocol. Each method either returns
    the parsed JSON body (None for an empty body) or raises.
    """

    @abstractmethod
    def get(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        """Issue a GET request."""

    @abstractmethod
    def post(
        self,
        path: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Issue a POST request with a JSON body."""

    @abstractmethod
    def put(
        self,
        path: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Issue a PUT request with a JSON body."""

    @abstractmethod
    def delete(
        self, path: str, params: dict[str, Any] | None = None, **kwargs: Any
    ) -> Any:
        """Issue a DELETE request."""


class SearchPageFetcher(Protocol):
    """Protocol for objects that can fetch one page of search results."""

    @abstractmethod
    def fetch_search_page(
        self, query: "SearchQuery", start_at: int, path: str | None = None
    ) -> "JiraSearchResult":
        """Fetch the page of ``query`` starting at ``start_at``."""
