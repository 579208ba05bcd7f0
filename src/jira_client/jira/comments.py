"""Module for Jira comment operations."""

import logging
from typing import Any

from ..models.jira import JiraComment
from .client import JiraClient

logger = logging.getLogger("jira-client")


def _comment_body(
    body: str, visibility_type: str | None, visibility_value: str | None
) -> dict[str, Any]:
    payload: dict[str, Any] = {"body": body}
    if visibility_type and visibility_value:
        payload["visibility"] = {"type": visibility_type, "value": visibility_value}
    return payload


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def get_issue_comments(self, issue_key: str) -> list[JiraComment]:
        """
        Get comments for a specific issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraComment models, oldest first

        Raises:
            JiraOperationError: If there is an error getting comments
        """
        return self._get_resource_list(
            JiraComment,
            self._api("issue", issue_key, "comment"),
            f"retrieve comments for issue {issue_key}",
            key="comments",
        )

    def get_comment(self, issue_key: str, comment_id: str) -> JiraComment:
        """
        Get a single comment.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment_id: The comment id

        Returns:
            JiraComment model
        """
        return self._get_resource(
            JiraComment,
            self._api("issue", issue_key, "comment", comment_id),
            f"retrieve comment {comment_id} on issue {issue_key}",
        )

    def add_comment(
        self,
        issue_key: str,
        body: str,
        visibility_type: str | None = None,
        visibility_value: str | None = None,
    ) -> JiraComment:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            body: Comment text in Jira wiki markup
            visibility_type: Restrict visibility by "group" or "role"
            visibility_value: The group or role name

        Returns:
            The created comment

        Raises:
            JiraOperationError: If there is an error adding the comment
        """
        response = self._request(
            "post",
            self._api("issue", issue_key, "comment"),
            f"add comment to issue {issue_key}",
            data=_comment_body(body, visibility_type, visibility_value),
        )
        return JiraComment.from_api_response(response)

    def update_comment(
        self,
        issue_key: str,
        comment_id: str,
        body: str,
        visibility_type: str | None = None,
        visibility_value: str | None = None,
    ) -> JiraComment:
        """
        Replace the body (and optionally the visibility) of a comment.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment_id: The comment id
            body: New comment text
            visibility_type: Restrict visibility by "group" or "role"
            visibility_value: The group or role name

        Returns:
            The updated comment
        """
        response = self._request(
            "put",
            self._api("issue", issue_key, "comment", comment_id),
            f"update comment {comment_id} on issue {issue_key}",
            data=_comment_body(body, visibility_type, visibility_value),
        )
        return JiraComment.from_api_response(response)
