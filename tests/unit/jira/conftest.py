"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from jira_client.jira import JiraFetcher
from jira_client.jira.client import JiraClient
from jira_client.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig for a Server/Data Center instance."""
    return JiraConfig(
        url="https://jira.example.com",
        auth_type="token",
        personal_token="test_personal_token",
    )


@pytest.fixture
def mock_cloud_config():
    """Create a JiraConfig for a Cloud instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        auth_type="basic",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira transport."""
    mock_jira = MagicMock()
    mock_jira.get.return_value = {}
    mock_jira.post.return_value = {}
    mock_jira.put.return_value = None
    mock_jira.delete.return_value = None
    yield mock_jira


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira):
    """Create a JiraClient instance with a mocked transport."""
    return JiraClient(config=mock_config, transport=mock_atlassian_jira)


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """Create a JiraFetcher instance with a mocked transport."""
    return JiraFetcher(config=mock_config, transport=mock_atlassian_jira)


@pytest.fixture
def cloud_fetcher(mock_cloud_config, mock_atlassian_jira):
    """Create a JiraFetcher pointed at a Cloud instance."""
    return JiraFetcher(config=mock_cloud_config, transport=mock_atlassian_jira)
