"""Module for Jira worklog operations."""

import logging
from datetime import datetime

from ..models.fields import format_datetime
from ..models.jira import JiraWorklog
from .client import JiraClient
from .constants import MINIMUM_WORKLOG_SECONDS
from .utils import format_duration_from_seconds, parse_time_spent

logger = logging.getLogger("jira-client")


class WorklogMixin(JiraClient):
    """Mixin for Jira worklog operations."""

    def get_worklog(self, issue_key: str, worklog_id: str) -> JiraWorklog:
        """
        Get a single worklog entry.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            worklog_id: The worklog id

        Returns:
            JiraWorklog model
        """
        return self._get_resource(
            JiraWorklog,
            self._api("issue", issue_key, "worklog", worklog_id),
            f"retrieve worklog {worklog_id} on issue {issue_key}",
        )

    def get_all_worklogs(self, issue_key: str) -> list[JiraWorklog]:
        """
        Get all worklog entries of an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraWorklog models
        """
        return self._get_resource_list(
            JiraWorklog,
            self._api("issue", issue_key, "worklog"),
            f"retrieve worklogs for issue {issue_key}",
            key="worklogs",
        )

    def add_worklog(
        self,
        issue_key: str,
        comment: str,
        started: datetime,
        time_spent_seconds: int,
    ) -> JiraWorklog:
        """
        Log work on an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Description of the work
            started: When the work started
            time_spent_seconds: Duration in seconds, at least one minute

        Returns:
            The created worklog

        Raises:
            ValueError: If the comment or start is missing, or the duration
                is under one minute
            JiraOperationError: If the request fails
        """
        if not comment:
            raise ValueError("A worklog requires a comment")
        if started is None:
            raise ValueError("A worklog requires a start date")
        if time_spent_seconds < MINIMUM_WORKLOG_SECONDS:
            raise ValueError(
                f"Time spent must be at least {MINIMUM_WORKLOG_SECONDS} seconds"
            )

        body = {
            "comment": comment,
            "started": format_datetime(started),
            "timeSpent": format_duration_from_seconds(time_spent_seconds),
        }
        response = self._request(
            "post",
            self._api("issue", issue_key, "worklog"),
            f"add worklog to issue {issue_key}",
            data=body,
        )
        logger.info(f"Logged {body['timeSpent']} on issue {issue_key}")
        return JiraWorklog.from_api_response(response)

    def log_work(
        self, issue_key: str, comment: str, started: datetime, time_spent: str
    ) -> JiraWorklog:
        """
        Log work using Jira duration notation, e.g. ``"1h 30m"`` or ``"2d"``.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Description of the work
            started: When the work started
            time_spent: Duration in Jira notation

        Returns:
            The created worklog
        """
        return self.add_worklog(
            issue_key, comment, started, parse_time_spent(time_spent)
        )
