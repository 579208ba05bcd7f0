"""Tests for the lenient field readers and the date/time formatters."""

from datetime import date, datetime, timedelta, timezone

import pytest

from jira_client.models.fields import (
    format_date,
    format_datetime,
    get_boolean,
    get_date,
    get_datetime,
    get_double,
    get_identifier,
    get_integer,
    get_integer_array,
    get_iso_datetime,
    get_map,
    get_string,
    get_string_array,
    resource,
    resource_array,
)
from jira_client.models.jira import JiraUser


class TestScalarReaders:
    """Tests for readers of scalar JSON values."""

    def test_get_string(self):
        assert get_string("text") == "text"
        assert get_string("") == ""
        assert get_string(5) is None
        assert get_string(None) is None

    def test_get_integer_rejects_other_types(self):
        assert get_integer(5) == 5
        assert get_integer(0) == 0
        assert get_integer("5") is None
        assert get_integer(5.5) is None
        assert get_integer(True) is None

    def test_get_integer_absent_is_none_not_zero(self):
        assert get_integer(None) is None

    def test_get_identifier_accepts_strings_and_integers(self):
        assert get_identifier("10000") == "10000"
        assert get_identifier(42) == 42
        assert get_identifier({"id": 1}) is None

    def test_get_double(self):
        assert get_double(1.5) == 1.5
        assert get_double(2) == 2.0
        assert get_double("1.5") is None
        assert get_double(False) is None

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, True),
            (False, False),
            ("true", False),
            (1, False),
            (None, False),
        ],
    )
    def test_get_boolean_only_accepts_json_true(self, value, expected):
        assert get_boolean(value) is expected

    def test_get_map_copies_objects(self):
        source = {"a": 1}
        result = get_map(source)
        assert result == {"a": 1}
        assert result is not source
        assert get_map(["a"]) is None


class TestDateReaders:
    """Tests for date and datetime readers."""

    def test_get_date(self):
        assert get_date("2024-03-01") == date(2024, 3, 1)

    def test_get_date_truncates_datetime_strings(self):
        assert get_date("2024-03-01T10:00:00.000+0000") == date(2024, 3, 1)

    @pytest.mark.parametrize("value", [None, "", "not a date", 20240301])
    def test_get_date_invalid_is_none(self, value):
        assert get_date(value) is None

    def test_get_datetime_parses_jira_timestamps(self):
        result = get_datetime("2024-01-02T15:30:00.123+0100")
        assert result == datetime(
            2024, 1, 2, 15, 30, 0, 123000, tzinfo=timezone(timedelta(hours=1))
        )

    def test_get_datetime_invalid_is_none(self):
        assert get_datetime("2024-01-02") is None
        assert get_datetime(None) is None
        assert get_datetime(1704067200000) is None

    def test_get_iso_datetime(self):
        result = get_iso_datetime("2024-01-01T10:00:00.000Z")
        assert result is not None
        assert result.year == 2024
        assert result.hour == 10
        assert result.utcoffset() == timedelta(0)
        assert get_iso_datetime(None) is None


class TestArrayReaders:
    """Tests for list readers."""

    def test_get_string_array_skips_other_items(self):
        assert get_string_array(["a", 1, None, "b"]) == ["a", "b"]

    def test_get_string_array_non_list_is_empty(self):
        assert get_string_array("a") == []
        assert get_string_array(None) == []

    def test_get_integer_array(self):
        assert get_integer_array([1, "2", 3, True]) == [1, 3]
        assert get_integer_array({"a": 1}) == []


class TestResourceReaders:
    """Tests for nested model readers."""

    def test_resource_builds_model(self):
        reader = resource(JiraUser)
        user = reader({"name": "jdoe", "displayName": "John Doe"})
        assert isinstance(user, JiraUser)
        assert user.display_name == "John Doe"

    def test_resource_non_object_is_none(self):
        assert resource(JiraUser)("jdoe") is None
        assert resource(JiraUser)(None) is None

    def test_resource_accepts_deferred_model(self):
        reader = resource(lambda: JiraUser)
        assert reader({"name": "jdoe"}).name == "jdoe"

    def test_resource_array_skips_non_objects(self):
        users = resource_array(JiraUser)([{"name": "a"}, "b", None, {"name": "c"}])
        assert [user.name for user in users] == ["a", "c"]

    def test_resource_array_non_list_is_empty(self):
        assert resource_array(JiraUser)({"name": "a"}) == []


class TestFormatters:
    """Tests for write-direction formatting."""

    def test_format_date(self):
        assert format_date(date(2024, 3, 1)) == "2024-03-01"
        assert format_date("2024-03-01") == "2024-03-01"
        assert format_date(None) is None

    def test_format_datetime_uses_milliseconds(self):
        value = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
        assert format_datetime(value) == "2024-01-02T03:04:05.678+0000"

    def test_format_datetime_keeps_offset(self):
        value = datetime(
            2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=-5, minutes=-30))
        )
        assert format_datetime(value) == "2024-01-02T03:04:05.000-0530"

    def test_format_datetime_naive_is_utc(self):
        assert format_datetime(datetime(2024, 1, 2, 3, 4, 5)) == (
            "2024-01-02T03:04:05.000+0000"
        )

    def test_format_datetime_passes_strings_through(self):
        assert format_datetime("2024-01-02T03:04:05.000+0000") == (
            "2024-01-02T03:04:05.000+0000"
        )
