"""
Base models for the Jira API resources.

Every resource model declares an ``api_fields`` table mapping attribute
names to :class:`~jira_client.models.fields.ApiField` rows. A single
generic deserializer walks that table, so models only describe their
JSON shape.
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from .fields import ApiField, get_identifier, get_string

logger = logging.getLogger(__name__)

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    # Dotted keys reach into nested objects, e.g. "fields.summary"
    value: Any = data
    for part in key.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    return value


def _store(data: dict[str, Any], key: str, value: Any) -> None:
    # Inverse of _lookup: dotted keys build nested objects
    *parents, leaf = key.split(".")
    for part in parents:
        data = data.setdefault(part, {})
    data[leaf] = value


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.

    Instances are immutable snapshots of a JSON resource. Refreshing a
    resource means fetching it again and building a new instance.
    """

    model_config = ConfigDict(frozen=True)

    api_fields: ClassVar[dict[str, ApiField]] = {}

    @classmethod
    def field_table(cls) -> dict[str, ApiField]:
        """Return the field table merged across the class hierarchy."""
        table: dict[str, ApiField] = {}
        for klass in reversed(cls.__mro__):
            table.update(klass.__dict__.get("api_fields", {}))
        return table

    @classmethod
    def from_api_response(cls: type[T], data: Mapping[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Extra attribute values that are not part of the payload

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the model declares no field table
        """
        table = cls.field_table()
        if not table:
            raise NotImplementedError("Subclasses must implement from_api_response")

        if not data:
            return cls(**kwargs)

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, Mapping):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls(**kwargs)

        values = {
            attr: api_field.coerce(_lookup(data, api_field.key))
            for attr, api_field in table.items()
        }
        values.update(kwargs)
        return cls(**values)

    def to_api_dict(self) -> dict[str, Any]:
        """
        Serialize the writable fields back into API JSON.

        Read-only fields and unset values are left out. Dotted keys are
        written as nested objects, so the result reads back through
        ``from_api_response``.

        Returns:
            A dictionary suitable for a create or update request body
        """
        result: dict[str, Any] = {}
        for attr, api_field in self.field_table().items():
            if not api_field.writable:
                continue
            value = getattr(self, attr)
            if value is None:
                continue
            _store(
                result,
                api_field.key,
                api_field.dump(value) if api_field.dump else value,
            )
        return result

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary.

        Returns:
            A JSON-compatible dictionary without None values
        """
        return self.model_dump(mode="json", exclude_none=True)


class JiraResource(ApiModel):
    """
    Common identity shared by every addressable Jira resource.

    The identifier is a string or an integer depending on the API
    generation that produced it.
    """

    id: str | int | None = None
    self_url: str | None = None

    api_fields: ClassVar[dict[str, ApiField]] = {
        "id": ApiField("id", get_identifier),
        "self_url": ApiField("self", get_string),
    }
