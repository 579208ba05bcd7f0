"""Fluent request builders for Jira write operations.

Builders collect field values locally and perform exactly one write call
when submitted. Values are shaped through :func:`~jira_client.models.fields.to_json`
using the metadata the server advertised when the builder was created.
Each builder is single-use.
"""

import logging
from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING, Any

from ..exceptions import EmptyRequestError, JiraOperationError, MalformedMetadataError
from ..models.fields import FieldOperation, format_date, to_json
from ..models.jira import (
    JiraComponent,
    JiraIssue,
    JiraRemoteLink,
    JiraTransition,
    JiraVersion,
)

if TYPE_CHECKING:
    from .client import JiraClient
    from .issues import IssuesMixin

logger = logging.getLogger("jira-client")


class _SingleUseBuilder:
    _executed: bool = False

    def _ensure_unused(self) -> None:
        if self._executed:
            raise JiraOperationError(
                f"{type(self).__name__} has already been executed"
            )


class IssueCreateBuilder(_SingleUseBuilder):
    """
    Collects fields for a new issue.

    Obtain one from :meth:`IssuesMixin.create_issue`, which presets the
    project and issue type and loads the create metadata.
    """

    def __init__(self, client: "IssuesMixin", create_metadata: Mapping[str, Any]):
        self._client = client
        self._metadata = create_metadata
        self._fields: dict[str, Any] = {}

    def field(self, name: str, value: Any) -> "IssueCreateBuilder":
        """Set a field value, e.g. ``field("summary", "Broken build")``."""
        self._fields[name] = value
        return self

    def execute(self, included_fields: str | list[str] | None = None) -> JiraIssue:
        """
        Create the issue and read it back.

        Args:
            included_fields: Fields to include when re-reading the new issue

        Returns:
            The created issue, fully populated

        Raises:
            EmptyRequestError: If no fields were given
            MalformedMetadataError: If a field is not in the create metadata
            JiraOperationError: If the request fails or the response has no key
        """
        self._ensure_unused()
        if not self._fields:
            raise EmptyRequestError("No fields were given for create")

        fields = {
            name: to_json(name, value, self._metadata)
            for name, value in self._fields.items()
        }
        response = self._client._request(
            "post", self._client._api("issue"), "create issue", data={"fields": fields}
        )
        key = response.get("key")
        if not isinstance(key, str):
            logger.error(f"Create issue response has no key: {response}")
            raise JiraOperationError("Unexpected result on create issue")

        self._executed = True
        logger.info(f"Created issue {key}")
        return self._client.get_issue(key, fields=included_fields)


class IssueUpdateBuilder(_SingleUseBuilder):
    """
    Collects field values and additive/subtractive edits for an issue.

    ``field()`` replaces a value. ``field_add()`` and ``field_remove()``
    queue operations on list fields such as labels or components.
    """

    def __init__(
        self, client: "JiraClient", issue_key: str, edit_metadata: Mapping[str, Any]
    ):
        self._client = client
        self._issue_key = issue_key
        self._metadata = edit_metadata
        self._fields: dict[str, Any] = {}
        self._operations: dict[str, list[FieldOperation]] = {}

    def field(self, name: str, value: Any) -> "IssueUpdateBuilder":
        self._fields[name] = value
        return self

    def field_add(self, name: str, value: Any) -> "IssueUpdateBuilder":
        return self._operation(name, "add", value)

    def field_remove(self, name: str, value: Any) -> "IssueUpdateBuilder":
        return self._operation(name, "remove", value)

    def _operation(self, name: str, op: str, value: Any) -> "IssueUpdateBuilder":
        self._operations.setdefault(name, []).append(FieldOperation(op, value))
        return self

    def execute(self) -> None:
        """
        Submit the update.

        Raises:
            EmptyRequestError: If neither fields nor operations were given
            MalformedMetadataError: If a field is not editable
            JiraOperationError: If the request fails
        """
        self._ensure_unused()
        if not self._fields and not self._operations:
            raise EmptyRequestError("No fields were given for update")

        body: dict[str, Any] = {}
        if self._fields:
            body["fields"] = {
                name: to_json(name, value, self._metadata)
                for name, value in self._fields.items()
            }
        if self._operations:
            body["update"] = {
                name: to_json(name, operations, self._metadata)
                for name, operations in self._operations.items()
            }

        self._client._request(
            "put",
            self._client._api("issue", self._issue_key),
            f"update issue {self._issue_key}",
            data=body,
            expect=None,
        )
        self._executed = True


class IssueTransitionBuilder(_SingleUseBuilder):
    """
    Collects screen fields for a workflow transition.

    The transition is chosen at execution time by id, by name, or by
    passing a :class:`JiraTransition` obtained from ``get_transitions``.
    """

    def __init__(
        self,
        client: "JiraClient",
        issue_key: str,
        transitions: list[JiraTransition],
    ):
        self._client = client
        self._issue_key = issue_key
        self._transitions = transitions
        self._fields: dict[str, Any] = {}

    def field(self, name: str, value: Any) -> "IssueTransitionBuilder":
        self._fields[name] = value
        return self

    def _find(self, transition: int | str | JiraTransition) -> JiraTransition:
        if isinstance(transition, JiraTransition):
            return transition
        for candidate in self._transitions:
            if isinstance(transition, int) and str(candidate.id) == str(transition):
                return candidate
            if isinstance(transition, str) and candidate.name == transition:
                return candidate
        known = ", ".join(str(t.name) for t in self._transitions)
        raise JiraOperationError(
            f"Transition '{transition}' was not found. Known transitions are: {known}"
        )

    def execute(self, transition: int | str | JiraTransition) -> None:
        """
        Perform the transition.

        Args:
            transition: Transition id, name, or object

        Raises:
            JiraOperationError: If the transition is unknown or the request fails
            MalformedMetadataError: If fields were given but the transition
                does not describe any
        """
        self._ensure_unused()
        target = self._find(transition)

        body: dict[str, Any] = {"transition": {"id": str(target.id)}}
        if self._fields:
            if target.fields is None:
                raise MalformedMetadataError("Transition is missing fields")
            body["fields"] = {
                name: to_json(name, value, target.fields)
                for name, value in self._fields.items()
            }

        self._client._request(
            "post",
            self._client._api("issue", self._issue_key, "transitions"),
            f"transition issue {self._issue_key}",
            data=body,
            expect=None,
        )
        self._executed = True
        logger.info(f"Transitioned issue {self._issue_key} via '{target.name}'")


class RemoteLinkBuilder(_SingleUseBuilder):
    """Builds a link from an issue to an external resource."""

    def __init__(self, client: "JiraClient", issue_key: str):
        self._client = client
        self._issue_key = issue_key
        self._global_id: str | None = None
        self._relationship: str | None = None
        self._application: dict[str, str] | None = None
        self._object: dict[str, Any] = {}

    def global_id(self, global_id: str) -> "RemoteLinkBuilder":
        """Set the global id; it doubles as the default url."""
        self._global_id = global_id
        self._object.setdefault("url", global_id)
        return self

    def url(self, url: str) -> "RemoteLinkBuilder":
        self._object["url"] = url
        return self

    def title(self, title: str) -> "RemoteLinkBuilder":
        self._object["title"] = title
        return self

    def summary(self, summary: str) -> "RemoteLinkBuilder":
        self._object["summary"] = summary
        return self

    def relationship(self, relationship: str) -> "RemoteLinkBuilder":
        self._relationship = relationship
        return self

    def icon(self, url: str, title: str | None = None) -> "RemoteLinkBuilder":
        icon = {"url16x16": url}
        if title:
            icon["title"] = title
        self._object["icon"] = icon
        return self

    def status(
        self,
        resolved: bool,
        icon_url: str | None = None,
        title: str | None = None,
        status_url: str | None = None,
    ) -> "RemoteLinkBuilder":
        """Mark the linked resource as resolved or not, with an optional icon."""
        icon: dict[str, str] = {}
        if title:
            icon["title"] = title
        if icon_url:
            icon["url16x16"] = icon_url
        if status_url:
            icon["link"] = status_url
        self._object["status"] = {
            "resolved": "true" if resolved else "false",
            "icon": icon,
        }
        return self

    def application(self, name: str, type: str | None = None) -> "RemoteLinkBuilder":
        application = {"name": name}
        if type:
            application["type"] = type
        self._application = application
        return self

    def create(self) -> JiraRemoteLink:
        """
        Create the remote link.

        Raises:
            ValueError: If the url or title is missing
            JiraOperationError: If the request fails
        """
        self._ensure_unused()
        if not self._object.get("url") or not self._object.get("title"):
            raise ValueError("A remote link requires a url and a title")

        body: dict[str, Any] = {"object": self._object}
        if self._global_id:
            body["globalId"] = self._global_id
        if self._relationship:
            body["relationship"] = self._relationship
        if self._application:
            body["application"] = self._application

        response = self._client._request(
            "post",
            self._client._api("issue", self._issue_key, "remotelink"),
            f"create remote link on issue {self._issue_key}",
            data=body,
        )
        self._executed = True
        return JiraRemoteLink.from_api_response(response)


class ComponentCreateBuilder(_SingleUseBuilder):
    """Builds a new project component."""

    def __init__(self, client: "JiraClient", project_key: str):
        self._client = client
        self._body: dict[str, Any] = {"project": project_key}

    def name(self, name: str) -> "ComponentCreateBuilder":
        self._body["name"] = name
        return self

    def description(self, description: str) -> "ComponentCreateBuilder":
        self._body["description"] = description
        return self

    def lead_user_name(self, username: str) -> "ComponentCreateBuilder":
        self._body["leadUserName"] = username
        return self

    def assignee_type(self, assignee_type: str) -> "ComponentCreateBuilder":
        self._body["assigneeType"] = assignee_type
        return self

    def assignee_type_valid(self, valid: bool) -> "ComponentCreateBuilder":
        self._body["isAssigneeTypeValid"] = valid
        return self

    def execute(self) -> JiraComponent:
        self._ensure_unused()
        if "name" not in self._body:
            raise EmptyRequestError("A component requires a name")
        response = self._client._request(
            "post", self._client._api("component"), "create component", data=self._body
        )
        if not isinstance(response.get("id"), str):
            logger.error(f"Create component response has no id: {response}")
            raise JiraOperationError("Unexpected result on create component")
        self._executed = True
        return JiraComponent.from_api_response(response)


class VersionCreateBuilder(_SingleUseBuilder):
    """Builds a new project version."""

    def __init__(self, client: "JiraClient", project_key: str):
        self._client = client
        self._body: dict[str, Any] = {"project": project_key}

    def name(self, name: str) -> "VersionCreateBuilder":
        self._body["name"] = name
        return self

    def description(self, description: str) -> "VersionCreateBuilder":
        self._body["description"] = description
        return self

    def archived(self, archived: bool) -> "VersionCreateBuilder":
        self._body["archived"] = archived
        return self

    def released(self, released: bool) -> "VersionCreateBuilder":
        self._body["released"] = released
        return self

    def release_date(self, release_date: date | str) -> "VersionCreateBuilder":
        self._body["releaseDate"] = format_date(release_date)
        return self

    def execute(self) -> JiraVersion:
        self._ensure_unused()
        if "name" not in self._body:
            raise EmptyRequestError("A version requires a name")
        response = self._client._request(
            "post", self._client._api("version"), "create version", data=self._body
        )
        if not isinstance(response.get("id"), str):
            logger.error(f"Create version response has no id: {response}")
            raise JiraOperationError("Unexpected result on create version")
        self._executed = True
        return JiraVersion.from_api_response(response)
