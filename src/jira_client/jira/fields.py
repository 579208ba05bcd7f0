"""Module for Jira field and write-metadata operations."""

import logging
from typing import Any

from ..exceptions import JiraOperationError, MalformedMetadataError
from .client import JiraClient
from .constants import CREATE_METADATA_EXPAND

logger = logging.getLogger("jira-client")


class FieldsMixin(JiraClient):
    """Mixin for Jira field operations."""

    def get_fields(self) -> list[dict[str, Any]]:
        """
        Get all field definitions, including custom fields.

        Returns:
            List of field definitions as returned by the API
        """
        fields = self._request("get", self._api("field"), "retrieve fields", expect=list)
        return [field for field in fields if isinstance(field, dict)]

    def get_field_id(self, name: str) -> str | None:
        """
        Find a field id by its display name (case-insensitive).

        Args:
            name: The field name, e.g. "Story Points"

        Returns:
            The field id, or None if no field has that name
        """
        wanted = name.lower()
        for field in self.get_fields():
            if str(field.get("name", "")).lower() == wanted:
                return field.get("id")
        logger.debug(f"No field named '{name}'")
        return None

    def get_create_metadata(self, project_key: str, issue_type: str) -> dict[str, Any]:
        """
        Get the fields that can be set when creating an issue.

        Args:
            project_key: The project key (e.g. 'PROJ')
            issue_type: The issue type name (e.g. 'Bug')

        Returns:
            The ``fields`` object of the create metadata, keyed by field id

        Raises:
            MalformedMetadataError: If the response does not have the expected shape
            JiraOperationError: If the project or issue type is not visible
        """
        response = self._request(
            "get",
            self._api("issue", "createmeta"),
            f"retrieve create metadata for {project_key}/{issue_type}",
            params={
                "expand": CREATE_METADATA_EXPAND,
                "projectKeys": project_key,
                "issuetypeNames": issue_type,
            },
        )

        projects = response.get("projects")
        if not isinstance(projects, list):
            raise MalformedMetadataError("Create metadata is malformed")

        project = projects[0] if projects and isinstance(projects[0], dict) else {}
        issue_types = project.get("issuetypes")
        if not issue_types:
            raise JiraOperationError(
                f"Project '{project_key}' or issue type '{issue_type}' missing "
                "from create metadata. Do you have enough permissions?"
            )

        first_type = issue_types[0] if isinstance(issue_types, list) else None
        fields = first_type.get("fields") if isinstance(first_type, dict) else None
        if not isinstance(fields, dict):
            raise MalformedMetadataError("Create metadata is malformed")
        return fields

    def get_edit_metadata(self, issue_key: str) -> dict[str, Any]:
        """
        Get the fields that can be edited on an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            The ``fields`` object of the edit metadata, keyed by field id

        Raises:
            MalformedMetadataError: If the response does not have the expected shape
        """
        response = self._request(
            "get",
            self._api("issue", issue_key, "editmeta"),
            f"retrieve edit metadata for issue {issue_key}",
        )
        fields = response.get("fields")
        if not isinstance(fields, dict):
            raise MalformedMetadataError("Edit metadata is malformed")
        return fields
