"""
Jira changelog models.

This module provides Pydantic models for issue change history.
"""

import logging
from datetime import datetime
from typing import ClassVar

from pydantic import Field

from ..base import ApiModel, JiraResource
from ..fields import ApiField, get_datetime, get_string, resource, resource_array
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraChangelogItem(ApiModel):
    """
    A single field change within a changelog entry.
    """

    field: str | None = None
    field_type: str | None = None
    from_value: str | None = None
    from_string: str | None = None
    to_value: str | None = None
    to_string: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "field": ApiField("field", get_string),
        "field_type": ApiField("fieldtype", get_string),
        "from_value": ApiField("from", get_string),
        "from_string": ApiField("fromString", get_string),
        "to_value": ApiField("to", get_string),
        "to_string": ApiField("toString", get_string),
    }


class JiraChangelog(JiraResource):
    """
    Model representing one entry of an issue's change history.
    """

    author: JiraUser | None = None
    created: datetime | None = None
    items: list[JiraChangelogItem] = Field(default_factory=list)

    api_fields: ClassVar[dict[str, ApiField]] = {
        "author": ApiField("author", resource(JiraUser)),
        "created": ApiField("created", get_datetime),
        "items": ApiField("items", resource_array(JiraChangelogItem)),
    }
