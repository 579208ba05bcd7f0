"""Module for Jira issue link operations."""

import logging
from typing import Any

from ..models.jira import JiraIssueLink, JiraIssueLinkType, JiraRemoteLink
from .builders import RemoteLinkBuilder
from .client import JiraClient

logger = logging.getLogger("jira-client")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    def link_issue(
        self,
        issue_key: str,
        other_issue_key: str,
        link_type: str,
        comment: str | None = None,
        visibility_type: str | None = None,
        visibility_value: str | None = None,
    ) -> None:
        """
        Link two issues.

        ``issue_key`` becomes the inward issue and ``other_issue_key`` the
        outward one, so ``link_issue("A-1", "B-2", "Blocks")`` reads as
        "B-2 blocks A-1" in the inward direction.

        Args:
            issue_key: The issue the link starts from
            other_issue_key: The issue being linked to
            link_type: Name of the link type, e.g. "Blocks"
            comment: Optional comment added with the link
            visibility_type: Restrict the comment by "group" or "role"
            visibility_value: The group or role name
        """
        body: dict[str, Any] = {
            "type": {"name": link_type},
            "inwardIssue": {"key": issue_key},
            "outwardIssue": {"key": other_issue_key},
        }
        if comment:
            body["comment"] = {"body": comment}
            if visibility_type and visibility_value:
                body["comment"]["visibility"] = {
                    "type": visibility_type,
                    "value": visibility_value,
                }

        self._request(
            "post",
            self._api("issueLink"),
            f"link issue {issue_key} to {other_issue_key}",
            data=body,
            expect=None,
        )
        logger.info(f"Linked {issue_key} to {other_issue_key} ({link_type})")

    def get_issue_link(self, link_id: str) -> JiraIssueLink:
        """Get an issue link by id."""
        return self._get_resource(
            JiraIssueLink, self._api("issueLink", link_id), f"retrieve issue link {link_id}"
        )

    def delete_issue_link(self, link_id: str) -> None:
        """Delete an issue link by id."""
        self._request(
            "delete",
            self._api("issueLink", link_id),
            f"delete issue link {link_id}",
            expect=None,
        )

    def get_link_type(self, link_type_id: str) -> JiraIssueLinkType:
        """Get an issue link type by id."""
        return self._get_resource(
            JiraIssueLinkType,
            self._api("issueLinkType", link_type_id),
            f"retrieve issue link type {link_type_id}",
        )

    def get_issue_link_types(self) -> list[JiraIssueLinkType]:
        """
        Get all issue link types defined on the instance.

        Returns:
            List of JiraIssueLinkType models
        """
        return self._get_resource_list(
            JiraIssueLinkType,
            self._api("issueLinkType"),
            "retrieve issue link types",
            key="issueLinkTypes",
        )

    def remote_link(self, issue_key: str) -> RemoteLinkBuilder:
        """
        Start building a remote link on an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            A RemoteLinkBuilder; call ``create()`` to submit it
        """
        return RemoteLinkBuilder(self, issue_key)

    def add_remote_link(
        self, issue_key: str, url: str, title: str, summary: str | None = None
    ) -> JiraRemoteLink:
        """
        Link an issue to an external URL.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            url: The external URL
            title: Link title shown in Jira
            summary: Optional description shown under the title

        Returns:
            The created remote link
        """
        builder = self.remote_link(issue_key).url(url).title(title)
        if summary:
            builder.summary(summary)
        return builder.create()

    def get_remote_links(self, issue_key: str) -> list[JiraRemoteLink]:
        """
        Get the remote links of an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraRemoteLink models
        """
        return self._get_resource_list(
            JiraRemoteLink,
            self._api("issue", issue_key, "remotelink"),
            f"retrieve remote links for issue {issue_key}",
        )
