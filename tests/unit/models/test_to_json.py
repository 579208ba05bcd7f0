"""Tests for converting caller values into write-request JSON."""

from datetime import date, datetime, timezone

import pytest

from jira_client.exceptions import JiraOperationError, MalformedMetadataError
from jira_client.models.fields import (
    FieldOperation,
    ValueTuple,
    ValueType,
    to_json,
)
from jira_client.models.jira import JiraTimetracking
from tests.fixtures.jira_mocks import MOCK_JIRA_CREATE_FIELDS, MOCK_JIRA_EDIT_METADATA


def _meta(schema: dict) -> dict:
    return {"field": {"name": "Field", "schema": schema}}


class TestToJsonScalars:
    """Tests for single-valued fields."""

    def test_plain_string(self):
        assert to_json("summary", "Broken build", MOCK_JIRA_CREATE_FIELDS) == (
            "Broken build"
        )

    def test_string_coerces_non_strings(self):
        assert to_json("summary", 42, MOCK_JIRA_CREATE_FIELDS) == "42"

    def test_project_is_referenced_by_key(self):
        assert to_json("project", "PROJ", MOCK_JIRA_CREATE_FIELDS) == {"key": "PROJ"}

    def test_parent_is_referenced_by_key(self):
        assert to_json("parent", "PROJ-1", MOCK_JIRA_CREATE_FIELDS) == {
            "key": "PROJ-1"
        }

    @pytest.mark.parametrize("name", ["issuetype", "priority", "assignee"])
    def test_named_types_are_referenced_by_name(self, name):
        assert to_json(name, "Value", MOCK_JIRA_CREATE_FIELDS) == {"name": "Value"}

    def test_value_tuple_overrides_the_identifier(self):
        value = ValueTuple(ValueType.ID, "10001")
        assert to_json("issuetype", value, MOCK_JIRA_CREATE_FIELDS) == {"id": "10001"}

    def test_value_tuple_with_plain_string_type(self):
        value = ValueTuple("accountId", "abc-123")
        assert to_json("assignee", value, MOCK_JIRA_CREATE_FIELDS) == {
            "accountId": "abc-123"
        }

    def test_mapping_is_passed_through(self):
        assert to_json("priority", {"id": "3"}, MOCK_JIRA_CREATE_FIELDS) == {"id": "3"}

    def test_select_custom_field_uses_value(self):
        assert to_json("customfield_10020", "High", MOCK_JIRA_CREATE_FIELDS) == {
            "value": "High"
        }

    def test_date(self):
        assert to_json("duedate", date(2024, 12, 31), MOCK_JIRA_CREATE_FIELDS) == (
            "2024-12-31"
        )

    def test_datetime(self):
        metadata = _meta({"type": "datetime"})
        value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert to_json("field", value, metadata) == "2024-01-02T03:04:05.000+0000"

    def test_number(self):
        assert to_json("customfield_10012", 3, MOCK_JIRA_CREATE_FIELDS) == 3
        assert to_json("customfield_10012", 2.5, MOCK_JIRA_CREATE_FIELDS) == 2.5

    @pytest.mark.parametrize("value", ["3", True])
    def test_number_rejects_non_numbers(self, value):
        with pytest.raises(ValueError, match="numeric"):
            to_json("customfield_10012", value, MOCK_JIRA_CREATE_FIELDS)

    def test_option(self):
        assert to_json("field", "Red", _meta({"type": "option"})) == {"value": "Red"}

    def test_timetracking_model(self):
        value = JiraTimetracking(original_estimate="1d", remaining_estimate="4h")
        assert to_json("field", value, _meta({"type": "timetracking"})) == {
            "originalEstimate": "1d",
            "remainingEstimate": "4h",
        }

    def test_any_is_passed_through(self):
        assert to_json("field", [1, {"a": 2}], _meta({"type": "any"})) == [
            1,
            {"a": 2},
        ]

    def test_none_stays_none(self):
        assert to_json("summary", None, MOCK_JIRA_CREATE_FIELDS) is None


class TestToJsonArrays:
    """Tests for list fields and update operations."""

    def test_string_items(self):
        assert to_json("labels", ["a", "b"], MOCK_JIRA_CREATE_FIELDS) == ["a", "b"]

    def test_tuple_input(self):
        assert to_json("labels", ("a",), MOCK_JIRA_CREATE_FIELDS) == ["a"]

    def test_named_items(self):
        assert to_json("components", ["Backend", "UI"], MOCK_JIRA_CREATE_FIELDS) == [
            {"name": "Backend"},
            {"name": "UI"},
        ]

    def test_multiselect_items_use_value(self):
        metadata = _meta(
            {
                "type": "array",
                "items": "string",
                "custom": "com.atlassian.jira.plugin.system.customfieldtypes:multiselect",
            }
        )
        assert to_json("field", ["A"], metadata) == [{"value": "A"}]

    def test_none_is_empty_list(self):
        assert to_json("labels", None, MOCK_JIRA_CREATE_FIELDS) == []

    def test_scalar_is_rejected(self):
        with pytest.raises(ValueError, match="list"):
            to_json("labels", "single", MOCK_JIRA_CREATE_FIELDS)

    def test_operations_wrap_each_item(self):
        operations = [FieldOperation("add", "new"), FieldOperation("remove", "old")]
        assert to_json("labels", operations, MOCK_JIRA_EDIT_METADATA["fields"]) == [
            {"add": "new"},
            {"remove": "old"},
        ]

    def test_operations_on_named_items(self):
        operations = [FieldOperation("add", "v1.0")]
        result = to_json("fixVersions", operations, MOCK_JIRA_EDIT_METADATA["fields"])
        assert result == [{"add": {"name": "v1.0"}}]


class TestToJsonMetadataErrors:
    """Tests for missing or incomplete metadata."""

    def test_unknown_field(self):
        with pytest.raises(
            MalformedMetadataError, match="'nope' does not exist or is read-only"
        ):
            to_json("nope", "x", MOCK_JIRA_CREATE_FIELDS)

    def test_metadata_not_an_object(self):
        with pytest.raises(MalformedMetadataError, match="Field metadata is malformed"):
            to_json("summary", "x", ["summary"])

    def test_missing_schema(self):
        with pytest.raises(MalformedMetadataError, match="missing schema metadata"):
            to_json("field", "x", {"field": {"name": "Field"}})

    def test_missing_type(self):
        with pytest.raises(MalformedMetadataError, match="missing type information"):
            to_json("field", "x", _meta({"system": "field"}))

    def test_unsupported_type(self):
        with pytest.raises(MalformedMetadataError, match="unsupported type 'weird'"):
            to_json("field", "x", _meta({"type": "weird"}))

    def test_metadata_errors_are_operation_errors(self):
        with pytest.raises(JiraOperationError):
            to_json("nope", "x", MOCK_JIRA_CREATE_FIELDS)
