"""Module for Jira boards operations."""

import logging

from ..models.jira import JiraBoard
from .client import JiraClient

logger = logging.getLogger("jira-client")


class BoardsMixin(JiraClient):
    """Mixin for Jira boards operations."""

    def get_board(self, board_id: int | str) -> JiraBoard:
        """
        Get a board by id.

        Args:
            board_id: The board id

        Returns:
            JiraBoard model
        """
        return self._get_resource(
            JiraBoard, self._agile("board", board_id), f"retrieve board {board_id}"
        )

    def get_all_boards(
        self, board_type: str | None = None, project_key: str | None = None
    ) -> list[JiraBoard]:
        """
        Get all boards visible to the current user.

        Args:
            board_type: Optional board type filter ("scrum" or "kanban")
            project_key: Optional project key or id filter

        Returns:
            List of JiraBoard models across all pages
        """
        params = {}
        if board_type:
            params["type"] = board_type
        if project_key:
            params["projectKeyOrId"] = project_key
        return self._get_all_values(
            JiraBoard, self._agile("board"), "retrieve boards", params=params
        )
