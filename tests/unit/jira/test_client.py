"""Tests for the Jira client module."""

from unittest.mock import MagicMock, patch

import pytest
from requests.exceptions import ConnectionError, HTTPError

from jira_client.exceptions import JiraAuthenticationError, JiraOperationError
from jira_client.jira.client import JiraClient
from jira_client.jira.config import JiraConfig
from jira_client.models.jira import JiraUser
from jira_client.utils.ssl import SSLIgnoreAdapter


def _http_error(status_code: int) -> HTTPError:
    response = MagicMock()
    response.status_code = status_code
    return HTTPError(f"{status_code} Client Error", response=response)


class TestJiraClientInit:
    """Tests for building the underlying transport."""

    def test_init_with_token_auth(self, mock_config):
        with patch("jira_client.jira.client.Jira") as mock_jira:
            client = JiraClient(config=mock_config)

            mock_jira.assert_called_once_with(
                url="https://jira.example.com",
                token="test_personal_token",
                cloud=False,
                verify_ssl=True,
                timeout=75,
            )
            assert client.jira is mock_jira.return_value
            assert client.config is mock_config

    def test_init_with_basic_auth(self, mock_cloud_config):
        with patch("jira_client.jira.client.Jira") as mock_jira:
            JiraClient(config=mock_cloud_config)

            mock_jira.assert_called_once_with(
                url="https://test.atlassian.net",
                username="test_username",
                password="test_token",
                cloud=True,
                verify_ssl=True,
                timeout=75,
            )

    def test_init_from_env(self, mock_env_vars):
        with patch("jira_client.jira.client.Jira"):
            client = JiraClient()

            assert client.config.url == "https://test.atlassian.net"
            assert client.config.auth_type == "basic"

    def test_init_with_ssl_verify_disabled(self):
        config = JiraConfig(
            url="https://jira.example.com",
            auth_type="token",
            personal_token="token",
            ssl_verify=False,
        )
        with patch("jira_client.jira.client.Jira") as mock_jira:
            JiraClient(config=config)

            calls = mock_jira.return_value._session.mount.call_args_list
            assert [c.args[0] for c in calls] == ["https://jira.example.com"]
            assert all(isinstance(c.args[1], SSLIgnoreAdapter) for c in calls)

    def test_init_applies_proxies(self):
        config = JiraConfig(
            url="https://jira.example.com",
            auth_type="token",
            personal_token="token",
            http_proxy="http://proxy:8080",
            no_proxy="localhost",
        )
        with patch("jira_client.jira.client.Jira") as mock_jira:
            JiraClient(config=config)

            mock_jira.return_value._session.proxies.update.assert_called_once_with(
                {"http": "http://proxy:8080", "no_proxy": "localhost"}
            )

    def test_injected_transport_is_used(self, mock_config, mock_atlassian_jira):
        with patch("jira_client.jira.client.Jira") as mock_jira:
            client = JiraClient(config=mock_config, transport=mock_atlassian_jira)

            mock_jira.assert_not_called()
            assert client.jira is mock_atlassian_jira


class TestPaths:
    """Tests for REST path construction."""

    def test_api_path(self, jira_client):
        assert jira_client._api("issue", "PROJ-1") == "rest/api/2/issue/PROJ-1"

    def test_api_path_follows_configured_version(self, mock_atlassian_jira):
        config = JiraConfig(
            url="https://jira.example.com",
            auth_type="token",
            personal_token="token",
            api_version="3",
        )
        client = JiraClient(config=config, transport=mock_atlassian_jira)
        assert client._api("search") == "rest/api/3/search"

    def test_agile_path(self, jira_client):
        assert jira_client._agile("board", 7, "sprint") == "rest/agile/1.0/board/7/sprint"


class TestRequest:
    """Tests for the single request funnel."""

    def test_passes_only_given_arguments(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"ok": True}

        result = jira_client._request("get", "rest/api/2/myself", "read")

        assert result == {"ok": True}
        mock_atlassian_jira.get.assert_called_once_with("rest/api/2/myself")

    def test_passes_params_and_data(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.post.return_value = {"id": "1"}

        jira_client._request(
            "post", "rest/api/2/thing", "create thing", params={"a": 1}, data={"b": 2}
        )

        mock_atlassian_jira.post.assert_called_once_with(
            "rest/api/2/thing", params={"a": 1}, data={"b": 2}
        )

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_auth_errors(self, jira_client, mock_atlassian_jira, status_code):
        mock_atlassian_jira.get.side_effect = _http_error(status_code)

        with pytest.raises(JiraAuthenticationError) as excinfo:
            jira_client._request("get", "rest/api/2/issue/X-1", "retrieve issue X-1")

        assert excinfo.value.message == "Failed to retrieve issue X-1"
        assert isinstance(excinfo.value.cause, HTTPError)

    def test_other_http_errors(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.get.side_effect = _http_error(404)

        with pytest.raises(JiraOperationError) as excinfo:
            jira_client._request("get", "rest/api/2/issue/X-1", "retrieve issue X-1")

        assert not isinstance(excinfo.value, JiraAuthenticationError)
        assert str(excinfo.value).startswith("Failed to retrieve issue X-1: ")

    def test_transport_errors(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.delete.side_effect = ConnectionError("refused")

        with pytest.raises(JiraOperationError, match="Failed to delete thing: refused"):
            jira_client._request("delete", "rest/api/2/thing", "delete thing")

    def test_malformed_payload(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = ["not", "an", "object"]

        with pytest.raises(JiraOperationError, match="JSON payload is malformed"):
            jira_client._request("get", "rest/api/2/myself", "read")

    def test_empty_body_is_malformed_when_object_expected(
        self, jira_client, mock_atlassian_jira
    ):
        mock_atlassian_jira.get.return_value = None

        with pytest.raises(JiraOperationError, match="malformed"):
            jira_client._request("get", "rest/api/2/myself", "read")

    def test_expect_none_accepts_empty_body(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.put.return_value = None

        assert jira_client._request("put", "p", "update", expect=None) is None


class TestResourceHelpers:
    """Tests for the model-mapping helpers."""

    def test_get_resource(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"name": "jdoe"}

        user = jira_client._get_resource(JiraUser, "rest/api/2/user", "read user")

        assert isinstance(user, JiraUser)
        assert user.name == "jdoe"

    def test_get_resource_list(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = [{"name": "a"}, "junk", {"name": "b"}]

        users = jira_client._get_resource_list(JiraUser, "p", "read users")

        assert [user.name for user in users] == ["a", "b"]

    def test_get_resource_list_under_key(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"users": [{"name": "a"}]}

        users = jira_client._get_resource_list(JiraUser, "p", "read", key="users")

        assert [user.name for user in users] == ["a"]

    def test_get_resource_list_missing_key(self, jira_client, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"other": []}

        with pytest.raises(JiraOperationError, match="missing 'users' list"):
            jira_client._get_resource_list(JiraUser, "p", "read", key="users")
