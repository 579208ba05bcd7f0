"""Tests for the Jira Sprints mixin."""

from datetime import timezone

from jira_client.models.jira import JiraEpic, JiraSprint
from tests.fixtures.jira_mocks import make_search_page

SPRINT = {
    "id": 37,
    "self": "https://jira.example.com/rest/agile/1.0/sprint/37",
    "state": "active",
    "name": "Sprint 37",
    "startDate": "2024-01-01T10:00:00.000Z",
    "endDate": "2024-01-15T10:00:00.000Z",
    "originBoardId": 5,
    "goal": "Ship it",
}


class TestSprintsMixin:
    """Tests for the SprintsMixin class."""

    def test_get_sprint(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = SPRINT

        sprint = jira_fetcher.get_sprint(37)

        assert isinstance(sprint, JiraSprint)
        assert sprint.goal == "Ship it"
        assert sprint.start_date.tzinfo is not None
        assert sprint.start_date.astimezone(timezone.utc).hour == 10
        mock_atlassian_jira.get.assert_called_once_with("rest/agile/1.0/sprint/37")

    def test_get_board_sprints(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"isLast": True, "values": [SPRINT]}

        sprints = jira_fetcher.get_board_sprints(5, state="active")

        assert [s.id for s in sprints] == [37]
        mock_atlassian_jira.get.assert_called_once_with(
            "rest/agile/1.0/board/5/sprint",
            params={"state": "active", "startAt": 0, "maxResults": 50},
        )

    def test_iter_sprint_issues(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.side_effect = [
            make_search_page(0, 3, 3),
            {"startAt": 3, "total": 3, "issues": []},
        ]

        iterator = jira_fetcher.iter_sprint_issues(37, fields=["summary"])
        keys = [issue.key for issue in iterator]

        assert keys == ["PROJ-1", "PROJ-2", "PROJ-3"]
        assert iterator.total == 3
        first = mock_atlassian_jira.get.call_args_list[0]
        assert first.args == ("rest/agile/1.0/sprint/37/issue",)
        assert first.kwargs["params"] == {"fields": "summary", "startAt": 0}

    def test_get_epic(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {
            "id": 23,
            "key": "PROJ-5",
            "name": "Checkout",
            "summary": "Checkout rework",
            "color": {"key": "color_4"},
            "done": True,
        }

        epic = jira_fetcher.get_epic("PROJ-5")

        assert isinstance(epic, JiraEpic)
        assert epic.color == "color_4"
        assert epic.done is True
        mock_atlassian_jira.get.assert_called_once_with("rest/agile/1.0/epic/PROJ-5")
