"""
Root pytest configuration file for jira-client tests.
"""

import copy
from typing import Any

import pytest

from tests.fixtures.jira_mocks import (
    MOCK_JIRA_CHANGELOG_HISTORIES,
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_JIRA_VERSION,
)


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return mock Jira issue data, safe to mutate."""
    return copy.deepcopy(MOCK_JIRA_ISSUE_RESPONSE)


@pytest.fixture
def jira_issue_with_changelog(jira_issue_data) -> dict[str, Any]:
    """Return mock Jira issue data expanded with its changelog."""
    jira_issue_data["changelog"] = {
        "startAt": 0,
        "maxResults": 1,
        "total": 1,
        "histories": copy.deepcopy(MOCK_JIRA_CHANGELOG_HISTORIES),
    }
    return jira_issue_data


@pytest.fixture
def jira_version_data() -> dict[str, Any]:
    """Return mock Jira version data."""
    return copy.deepcopy(MOCK_JIRA_VERSION)
