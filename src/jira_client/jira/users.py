"""Module for Jira user operations."""

import logging

from ..models.jira import JiraUser
from .client import JiraClient

logger = logging.getLogger("jira-client")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_user(self, username: str) -> JiraUser:
        """
        Get a user.

        Jira Cloud identifies users by account id, Server/Data Center by
        username; the parameter is chosen from the configured URL.

        Args:
            username: Username (Server/DC) or account id (Cloud)

        Returns:
            JiraUser model
        """
        param = "accountId" if self.config.is_cloud else "username"
        return self._get_resource(
            JiraUser,
            self._api("user"),
            f"retrieve user {username}",
            params={param: username},
        )

    def get_current_user(self) -> JiraUser:
        """Get the user the client is authenticated as."""
        return self._get_resource(JiraUser, self._api("myself"), "retrieve current user")
