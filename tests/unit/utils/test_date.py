"""Tests for the date utilities module."""

from datetime import datetime, timezone

from jira_client.utils.date import parse_date


def test_parse_date_none():
    assert parse_date(None) is None
    assert parse_date("") is None


def test_parse_date_iso():
    result = parse_date("2024-01-01T10:00:00.000+0000")
    assert result == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


def test_parse_date_epoch_millis():
    assert parse_date("1704103200000") == datetime(
        2024, 1, 1, 10, 0, tzinfo=timezone.utc
    )
    assert parse_date(1704103200000) == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


def test_parse_date_invalid():
    assert parse_date("not a date") is None
