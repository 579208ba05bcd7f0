"""
Jira search result models.

This module provides Pydantic models for one page of search results.
"""

import logging
from typing import Any, ClassVar

from pydantic import Field

from ..base import ApiModel
from ..fields import ApiField, get_integer, resource_array
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing one page of a Jira search.

    ``max_results`` is the page size the server actually used, which may
    be lower than requested. ``total`` reflects the result count at the
    time of the call.
    """

    total: int | None = None
    start_at: int | None = None
    max_results: int | None = None
    issues: list[JiraIssue] = Field(default_factory=list)

    api_fields: ClassVar[dict[str, ApiField]] = {
        "total": ApiField("total", get_integer),
        "start_at": ApiField("startAt", get_integer),
        "max_results": ApiField("maxResults", get_integer),
        "issues": ApiField("issues", resource_array(JiraIssue)),
    }

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "total": self.total,
            "start_at": self.start_at,
            "max_results": self.max_results,
            "issues": [issue.to_simplified_dict() for issue in self.issues],
        }
