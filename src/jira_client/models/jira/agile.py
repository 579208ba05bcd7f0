"""
Jira agile models.

This module provides Pydantic models for boards, sprints, and epics
returned by the Agile REST API.
"""

import logging
from datetime import datetime
from typing import ClassVar

from ..base import JiraResource
from ..fields import (
    ApiField,
    get_boolean,
    get_integer,
    get_iso_datetime,
    get_string,
)

logger = logging.getLogger(__name__)


class JiraBoard(JiraResource):
    """
    Model representing a Jira board.
    """

    name: str | None = None
    type: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "type": ApiField("type", get_string),
    }


class JiraSprint(JiraResource):
    """
    Model representing a Jira sprint.
    """

    name: str | None = None
    state: str | None = None
    goal: str | None = None
    origin_board_id: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    complete_date: datetime | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "state": ApiField("state", get_string),
        "goal": ApiField("goal", get_string),
        "origin_board_id": ApiField("originBoardId", get_integer),
        "start_date": ApiField("startDate", get_iso_datetime),
        "end_date": ApiField("endDate", get_iso_datetime),
        "complete_date": ApiField("completeDate", get_iso_datetime),
    }


class JiraEpic(JiraResource):
    """
    Model representing an epic as seen by the Agile API.
    """

    key: str | None = None
    name: str | None = None
    summary: str | None = None
    color: str | None = None
    done: bool = False

    api_fields: ClassVar[dict[str, ApiField]] = {
        "key": ApiField("key", get_string),
        "name": ApiField("name", get_string),
        "summary": ApiField("summary", get_string),
        "color": ApiField("color.key", get_string),
        "done": ApiField("done", get_boolean),
    }
