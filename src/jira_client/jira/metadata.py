"""Module for Jira reference data: statuses, issue types, priorities and more."""

import logging

from ..models.jira import (
    JiraIssueType,
    JiraPriority,
    JiraResolution,
    JiraSecurityLevel,
    JiraStatus,
)
from .client import JiraClient

logger = logging.getLogger("jira-client")


class MetadataMixin(JiraClient):
    """Mixin for looking up Jira reference data by id."""

    def get_status(self, status_id: str) -> JiraStatus:
        return self._get_resource(
            JiraStatus, self._api("status", status_id), f"retrieve status {status_id}"
        )

    def get_issue_type(self, issue_type_id: str) -> JiraIssueType:
        return self._get_resource(
            JiraIssueType,
            self._api("issuetype", issue_type_id),
            f"retrieve issue type {issue_type_id}",
        )

    def get_issue_types(self) -> list[JiraIssueType]:
        """Get all issue types visible to the current user."""
        return self._get_resource_list(
            JiraIssueType, self._api("issuetype"), "retrieve issue types"
        )

    def get_priority(self, priority_id: str) -> JiraPriority:
        return self._get_resource(
            JiraPriority,
            self._api("priority", priority_id),
            f"retrieve priority {priority_id}",
        )

    def get_priorities(self) -> list[JiraPriority]:
        """Get all priorities, in their configured order."""
        return self._get_resource_list(
            JiraPriority, self._api("priority"), "retrieve priorities"
        )

    def get_resolution(self, resolution_id: str) -> JiraResolution:
        return self._get_resource(
            JiraResolution,
            self._api("resolution", resolution_id),
            f"retrieve resolution {resolution_id}",
        )

    def get_security_level(self, security_level_id: str) -> JiraSecurityLevel:
        return self._get_resource(
            JiraSecurityLevel,
            self._api("securitylevel", security_level_id),
            f"retrieve security level {security_level_id}",
        )
