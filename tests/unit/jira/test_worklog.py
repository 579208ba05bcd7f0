"""Tests for the Jira Worklog mixin."""

from datetime import datetime, timezone

import pytest

from jira_client.models.jira import JiraWorklog

WORKLOG = {
    "id": "10001",
    "comment": "Work item 1",
    "created": "2024-01-01T10:00:00.000+0000",
    "updated": "2024-01-01T10:30:00.000+0000",
    "started": "2024-01-01T09:00:00.000+0000",
    "timeSpent": "1h 10m",
    "timeSpentSeconds": 4200,
    "author": {"displayName": "Test User"},
}

STARTED = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


class TestWorklogMixin:
    """Tests for the WorklogMixin class."""

    def test_get_all_worklogs(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {
            "startAt": 0,
            "total": 1,
            "worklogs": [WORKLOG],
        }

        worklogs = jira_fetcher.get_all_worklogs("PROJ-1")

        assert len(worklogs) == 1
        assert worklogs[0].time_spent_seconds == 4200
        assert worklogs[0].author.display_name == "Test User"
        mock_atlassian_jira.get.assert_called_once_with("rest/api/2/issue/PROJ-1/worklog")

    def test_get_worklog(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = WORKLOG

        worklog = jira_fetcher.get_worklog("PROJ-1", "10001")

        assert worklog.started == STARTED
        mock_atlassian_jira.get.assert_called_once_with(
            "rest/api/2/issue/PROJ-1/worklog/10001"
        )

    def test_add_worklog(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.post.return_value = WORKLOG

        worklog = jira_fetcher.add_worklog("PROJ-1", "Work item 1", STARTED, 4203)

        assert isinstance(worklog, JiraWorklog)
        mock_atlassian_jira.post.assert_called_once_with(
            "rest/api/2/issue/PROJ-1/worklog",
            data={
                "comment": "Work item 1",
                "started": "2024-01-01T09:00:00.000+0000",
                "timeSpent": "1h 10m",
            },
        )

    def test_log_work_parses_duration(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.post.return_value = WORKLOG

        jira_fetcher.log_work("PROJ-1", "Work item 1", STARTED, "1d 2h")

        assert mock_atlassian_jira.post.call_args.kwargs["data"]["timeSpent"] == (
            "10h 0m"
        )

    def test_log_work_rejects_unparseable_duration(
        self, jira_fetcher, mock_atlassian_jira
    ):
        with pytest.raises(ValueError, match="Could not parse time spent"):
            jira_fetcher.log_work("PROJ-1", "work", STARTED, "soon")

        mock_atlassian_jira.post.assert_not_called()

    def test_add_worklog_requires_a_minute(self, jira_fetcher, mock_atlassian_jira):
        with pytest.raises(ValueError, match="at least 60 seconds"):
            jira_fetcher.add_worklog("PROJ-1", "Quick", STARTED, 59)

        mock_atlassian_jira.post.assert_not_called()

    def test_add_worklog_requires_comment(self, jira_fetcher):
        with pytest.raises(ValueError, match="comment"):
            jira_fetcher.add_worklog("PROJ-1", "", STARTED, 600)

    def test_add_worklog_requires_start(self, jira_fetcher):
        with pytest.raises(ValueError, match="start date"):
            jira_fetcher.add_worklog("PROJ-1", "Work", None, 600)
