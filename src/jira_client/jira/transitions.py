"""Module for Jira transition operations."""

import logging

from ..models.jira import JiraTransition
from .builders import IssueTransitionBuilder
from .client import JiraClient
from .constants import TRANSITION_FIELDS_EXPAND

logger = logging.getLogger("jira-client")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the transitions currently available on an issue.

        Each transition carries the screen fields it accepts.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraTransition models

        Raises:
            JiraOperationError: If the transitions cannot be retrieved
        """
        return self._get_resource_list(
            JiraTransition,
            self._api("issue", issue_key, "transitions"),
            f"retrieve transitions for issue {issue_key}",
            params={"expand": TRANSITION_FIELDS_EXPAND},
            key="transitions",
        )

    def transition_issue(self, issue_key: str) -> IssueTransitionBuilder:
        """
        Start building a transition for an issue.

        The available transitions are fetched now; the transition itself
        is chosen when ``execute()`` is called on the builder.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            An IssueTransitionBuilder
        """
        transitions = self.get_transitions(issue_key)
        return IssueTransitionBuilder(self, issue_key, transitions)
