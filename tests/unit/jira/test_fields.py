"""Tests for the Jira Fields mixin."""

import copy

import pytest

from jira_client.exceptions import JiraOperationError, MalformedMetadataError
from tests.fixtures.jira_mocks import MOCK_JIRA_CREATE_METADATA, MOCK_JIRA_EDIT_METADATA

MOCK_FIELDS = [
    {"id": "summary", "name": "Summary", "schema": {"type": "string"}},
    {
        "id": "customfield_10012",
        "name": "Story Points",
        "custom": True,
        "schema": {"type": "number"},
    },
    "junk",
]


class TestFieldsMixin:
    """Tests for the FieldsMixin class."""

    def test_get_fields(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = copy.deepcopy(MOCK_FIELDS)

        fields = jira_fetcher.get_fields()

        assert [field["id"] for field in fields] == ["summary", "customfield_10012"]
        mock_atlassian_jira.get.assert_called_once_with("rest/api/2/field")

    def test_get_field_id_is_case_insensitive(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = copy.deepcopy(MOCK_FIELDS)

        assert jira_fetcher.get_field_id("story points") == "customfield_10012"

    def test_get_field_id_unknown(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = copy.deepcopy(MOCK_FIELDS)

        assert jira_fetcher.get_field_id("Nope") is None

    def test_get_create_metadata(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = copy.deepcopy(MOCK_JIRA_CREATE_METADATA)

        fields = jira_fetcher.get_create_metadata("PROJ", "Task")

        assert "summary" in fields
        assert fields["customfield_10012"]["schema"]["type"] == "number"

    def test_get_create_metadata_not_visible(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"projects": []}

        with pytest.raises(JiraOperationError, match="Do you have enough permissions"):
            jira_fetcher.get_create_metadata("PROJ", "Task")

    def test_get_create_metadata_malformed(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"expand": "projects"}

        with pytest.raises(MalformedMetadataError, match="Create metadata is malformed"):
            jira_fetcher.get_create_metadata("PROJ", "Task")

    def test_get_create_metadata_without_fields(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {
            "projects": [{"key": "PROJ", "issuetypes": [{"name": "Task"}]}]
        }

        with pytest.raises(MalformedMetadataError):
            jira_fetcher.get_create_metadata("PROJ", "Task")

    def test_get_edit_metadata(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = copy.deepcopy(MOCK_JIRA_EDIT_METADATA)

        fields = jira_fetcher.get_edit_metadata("PROJ-1")

        assert set(fields) == {"summary", "labels", "fixVersions", "assignee"}

    def test_get_edit_metadata_malformed(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"fields": []}

        with pytest.raises(MalformedMetadataError, match="Edit metadata is malformed"):
            jira_fetcher.get_edit_metadata("PROJ-1")
