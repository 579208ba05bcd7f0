"""Base client module for Jira API interactions."""

import logging
from collections.abc import Mapping
from typing import Any, Literal, TypeVar

from atlassian import Jira
from requests.exceptions import HTTPError

from ..exceptions import JiraAuthenticationError, JiraOperationError
from ..models.base import ApiModel
from ..utils.logging import log_config_param
from ..utils.ssl import configure_proxies, configure_ssl_verification
from ..utils.urls import join_path
from .config import JiraConfig
from .constants import DEFAULT_PAGE_SIZE
from .protocols import JiraTransport

# Configure logging
logger = logging.getLogger("jira-client")

M = TypeVar("M", bound=ApiModel)

HttpMethod = Literal["get", "post", "put", "delete"]


class JiraClient:
    """Base client for Jira API interactions.

    All calls go through :meth:`_request`, which turns transport failures
    and unexpected payload shapes into :class:`JiraOperationError`.
    """

    config: JiraConfig
    jira: JiraTransport

    def __init__(
        self,
        config: JiraConfig | None = None,
        transport: JiraTransport | None = None,
    ) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            transport: Optional pre-built transport, mostly useful in tests

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()

        log_config_param(logger, "URL", self.config.url)
        log_config_param(logger, "Auth type", self.config.auth_type)
        log_config_param(logger, "Username", self.config.username)
        log_config_param(logger, "API token", self.config.api_token, sensitive=True)
        log_config_param(
            logger, "Personal token", self.config.personal_token, sensitive=True
        )
        log_config_param(logger, "SSL verify", self.config.ssl_verify)
        log_config_param(logger, "HTTP proxy", self.config.http_proxy)
        log_config_param(logger, "HTTPS proxy", self.config.https_proxy)
        log_config_param(logger, "SOCKS proxy", self.config.socks_proxy)

        if transport is not None:
            self.jira = transport
        elif self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
            )

        session = getattr(self.jira, "_session", None)
        if session is not None:
            configure_ssl_verification(
                url=self.config.url,
                session=session,
                ssl_verify=self.config.ssl_verify,
            )
            configure_proxies(
                session,
                http_proxy=self.config.http_proxy,
                https_proxy=self.config.https_proxy,
                socks_proxy=self.config.socks_proxy,
                no_proxy=self.config.no_proxy,
            )

    def _api(self, *parts: str | int) -> str:
        """Build a path under the core REST API, e.g. ``rest/api/2/issue/X-1``."""
        return join_path(self.config.api_path, *parts)

    def _agile(self, *parts: str | int) -> str:
        """Build a path under the Agile REST API."""
        return join_path(self.config.agile_path, *parts)

    def _request(
        self,
        method: HttpMethod,
        path: str,
        action: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
        expect: type | tuple[type, ...] | None = dict,
    ) -> Any:
        """
        Perform a single API call.

        Args:
            method: The HTTP method
            path: Path relative to the Jira base URL
            action: Description of the attempted action for error messages,
                e.g. "retrieve issue PROJ-1"
            params: Query parameters
            data: JSON body for POST/PUT
            files: Multipart files for uploads
            headers: Extra request headers
            expect: Required type of the parsed response, or None to accept
                anything (including an empty body)

        Returns:
            The parsed JSON response

        Raises:
            JiraAuthenticationError: If Jira rejects the credentials (401/403)
            JiraOperationError: If the call fails or the payload is malformed
        """
        kwargs = {
            key: value
            for key, value in (
                ("params", params),
                ("data", data),
                ("files", files),
                ("headers", headers),
            )
            if value is not None
        }
        logger.debug(f"{method.upper()} {path} ({action})")

        try:
            result = getattr(self.jira, method)(path, **kwargs)
        except HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status in (401, 403):
                error_msg = (
                    f"Authentication failed for Jira API ({status}). "
                    "Token may be expired or invalid. Please verify credentials."
                )
                logger.error(error_msg)
                raise JiraAuthenticationError(f"Failed to {action}", e) from e
            logger.error(f"HTTP error while trying to {action}: {str(e)}")
            raise JiraOperationError(f"Failed to {action}", e) from e
        except Exception as e:
            logger.error(f"Error while trying to {action}: {str(e)}")
            raise JiraOperationError(f"Failed to {action}", e) from e

        if expect is not None and not isinstance(result, expect):
            msg = f"JSON payload is malformed: unexpected {type(result).__name__}"
            logger.error(f"{msg} while trying to {action}")
            raise JiraOperationError(f"Failed to {action}", TypeError(msg))

        return result

    def _get_resource(
        self,
        model: type[M],
        path: str,
        action: str,
        params: dict[str, Any] | None = None,
    ) -> M:
        """GET a single JSON object and map it onto ``model``."""
        response = self._request("get", path, action, params=params)
        return model.from_api_response(response)

    def _get_resource_list(
        self,
        model: type[M],
        path: str,
        action: str,
        params: dict[str, Any] | None = None,
        key: str | None = None,
    ) -> list[M]:
        """
        GET a list of JSON objects and map each onto ``model``.

        Args:
            model: Model class for the items
            path: Resource path
            action: Description used in error messages
            params: Query parameters
            key: If set, the response is an object and the list is under this key

        Returns:
            The mapped items, in server order
        """
        if key is None:
            items = self._request("get", path, action, params=params, expect=list)
        else:
            response = self._request("get", path, action, params=params)
            items = response.get(key)
            if not isinstance(items, list):
                msg = f"JSON payload is malformed: missing '{key}' list"
                logger.error(f"{msg} while trying to {action}")
                raise JiraOperationError(f"Failed to {action}", TypeError(msg))
        return [
            model.from_api_response(item) for item in items if isinstance(item, Mapping)
        ]

    def _get_all_values(
        self,
        model: type[M],
        path: str,
        action: str,
        params: dict[str, Any] | None = None,
    ) -> list[M]:
        """
        Repeatedly fetch an Agile API collection until ``isLast`` is set.

        Agile collections wrap their items as ``{"values": [...], "isLast": bool}``.

        Args:
            model: Model class for the items
            path: Collection path
            action: Description used in error messages
            params: Extra query parameters

        Returns:
            All items across all pages
        """
        results: list[M] = []
        start_at = 0

        while True:
            page_params = dict(params or {})
            page_params.update({"startAt": start_at, "maxResults": DEFAULT_PAGE_SIZE})
            response = self._request("get", path, action, params=page_params)

            values = response.get("values")
            if not isinstance(values, list):
                msg = "JSON payload is malformed: missing 'values' list"
                logger.error(f"{msg} while trying to {action}")
                raise JiraOperationError(f"Failed to {action}", TypeError(msg))

            results.extend(
                model.from_api_response(item)
                for item in values
                if isinstance(item, Mapping)
            )

            # Check if this is the last page
            if response.get("isLast", True) is True or not values:
                break

            start_at += len(values)

        return results
