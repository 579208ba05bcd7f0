"""
Jira workflow models.

This module provides Pydantic models for workflow transitions.
"""

import logging
from typing import Any, ClassVar

from ..base import JiraResource
from ..fields import ApiField, get_map, get_string, resource
from .common import JiraStatus

logger = logging.getLogger(__name__)


class JiraTransition(JiraResource):
    """
    Model representing a workflow transition available on an issue.

    ``fields`` holds the screen fields the transition accepts, keyed by id,
    in the same shape as create/edit metadata.
    """

    name: str | None = None
    to_status: JiraStatus | None = None
    fields: dict[str, Any] | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "name": ApiField("name", get_string),
        "to_status": ApiField("to", resource(JiraStatus)),
        "fields": ApiField("fields", get_map),
    }
