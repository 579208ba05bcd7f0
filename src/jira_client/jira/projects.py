"""Module for Jira project operations."""

import logging

from ..models.jira import JiraComponent, JiraProject, JiraUser, JiraVersion
from .builders import ComponentCreateBuilder, VersionCreateBuilder
from .client import JiraClient

logger = logging.getLogger("jira-client")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project, component and version operations."""

    def get_project(self, project_key: str) -> JiraProject:
        """
        Get a project by key or id.

        Args:
            project_key: The project key (e.g. 'PROJ')

        Returns:
            JiraProject model including components, versions and issue types
        """
        return self._get_resource(
            JiraProject, self._api("project", project_key), f"retrieve project {project_key}"
        )

    def get_all_projects(self) -> list[JiraProject]:
        """
        Get all projects visible to the current user.

        Returns:
            List of JiraProject models
        """
        return self._get_resource_list(
            JiraProject, self._api("project"), "retrieve projects"
        )

    def get_assignable_users(self, project_key: str) -> list[JiraUser]:
        """
        Get the users that can be assigned issues in a project.

        Args:
            project_key: The project key (e.g. 'PROJ')

        Returns:
            List of JiraUser models
        """
        return self._get_resource_list(
            JiraUser,
            self._api("user", "assignable", "search"),
            f"retrieve assignable users for project {project_key}",
            params={"project": project_key},
        )

    def get_component(self, component_id: str) -> JiraComponent:
        """Get a component by id."""
        return self._get_resource(
            JiraComponent,
            self._api("component", component_id),
            f"retrieve component {component_id}",
        )

    def create_component(self, project_key: str) -> ComponentCreateBuilder:
        """
        Start building a new component in a project.

        Args:
            project_key: The project key (e.g. 'PROJ')

        Returns:
            A ComponentCreateBuilder; call ``execute()`` to submit it
        """
        return ComponentCreateBuilder(self, project_key)

    def delete_component(self, component_id: str) -> None:
        """Delete a component by id."""
        self._request(
            "delete",
            self._api("component", component_id),
            f"delete component {component_id}",
            expect=None,
        )

    def get_version(self, version_id: str) -> JiraVersion:
        """Get a version by id."""
        return self._get_resource(
            JiraVersion, self._api("version", version_id), f"retrieve version {version_id}"
        )

    def get_project_versions(self, project_key: str) -> list[JiraVersion]:
        """
        Get all versions of a project.

        Args:
            project_key: The project key (e.g. 'PROJ')

        Returns:
            List of JiraVersion models
        """
        return self._get_resource_list(
            JiraVersion,
            self._api("project", project_key, "versions"),
            f"retrieve versions for project {project_key}",
        )

    def create_version(self, project_key: str) -> VersionCreateBuilder:
        """
        Start building a new version in a project.

        Args:
            project_key: The project key (e.g. 'PROJ')

        Returns:
            A VersionCreateBuilder; call ``execute()`` to submit it
        """
        return VersionCreateBuilder(self, project_key)

    def merge_version(self, target_id: str, source: JiraVersion) -> JiraVersion:
        """
        Overwrite a version with the writable fields of another.

        Args:
            target_id: Id of the version to update
            source: Version whose name, description, dates and flags are copied

        Returns:
            The updated version
        """
        body = source.to_api_dict()
        body.pop("project", None)
        body.pop("projectId", None)
        response = self._request(
            "put",
            self._api("version", target_id),
            f"merge version {source.id} into {target_id}",
            data=body,
        )
        return JiraVersion.from_api_response(response)

    def copy_version_to_project(
        self, version: JiraVersion, project: JiraProject
    ) -> JiraVersion:
        """
        Create a copy of a version in another project.

        Args:
            version: The version to copy
            project: The destination project

        Returns:
            The newly created version
        """
        body = version.to_api_dict()
        body["project"] = project.key
        if isinstance(project.id, int):
            body["projectId"] = project.id
        elif project.id is not None and str(project.id).isdigit():
            body["projectId"] = int(project.id)
        else:
            body.pop("projectId", None)

        response = self._request(
            "post",
            self._api("version"),
            f"copy version {version.name} to project {project.key}",
            data=body,
        )
        return JiraVersion.from_api_response(response)
