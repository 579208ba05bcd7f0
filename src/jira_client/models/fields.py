"""
Field coercion for Jira JSON values.

This module converts values in both directions:

- Read: lenient coercers that turn raw JSON-decoded values into Python
  types. They never raise on a type mismatch; an absent, null or
  mistyped value yields ``None`` (or an empty list for list readers).
- Write: :func:`to_json` shapes a caller supplied value for a write
  request, using the field schema the server advertises in its
  create/edit metadata.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, NamedTuple

from ..exceptions import MalformedMetadataError
from ..utils import parse_date

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"

# Well-known system fields
ASSIGNEE = "assignee"
ATTACHMENT = "attachment"
CHANGE_LOG = "changelog"
COMMENT = "comment"
COMPONENTS = "components"
DESCRIPTION = "description"
DUE_DATE = "duedate"
FIX_VERSIONS = "fixVersions"
ISSUE_LINKS = "issuelinks"
ISSUE_TYPE = "issuetype"
LABELS = "labels"
PARENT = "parent"
PRIORITY = "priority"
PROJECT = "project"
REPORTER = "reporter"
RESOLUTION = "resolution"
RESOLUTION_DATE = "resolutiondate"
SECURITY = "security"
STATUS = "status"
SUBTASKS = "subtasks"
SUMMARY = "summary"
TIME_TRACKING = "timetracking"
VERSIONS = "versions"
VOTES = "votes"
WATCHES = "watches"
WORKLOG = "worklog"
TIME_ESTIMATE = "timeestimate"
TIME_SPENT = "timespent"
CREATED_DATE = "created"
UPDATED_DATE = "updated"

CUSTOM_FIELD_PREFIX = "customfield_"

# Custom field types that take {"value": ...} instead of a bare string
CUSTOM_TYPE_SELECT = "com.atlassian.jira.plugin.system.customfieldtypes:select"
CUSTOM_TYPE_RADIO = "com.atlassian.jira.plugin.system.customfieldtypes:radiobuttons"
CUSTOM_TYPE_MULTISELECT = (
    "com.atlassian.jira.plugin.system.customfieldtypes:multiselect"
)
CUSTOM_TYPE_MULTICHECKBOXES = (
    "com.atlassian.jira.plugin.system.customfieldtypes:multicheckboxes"
)

_NAMED_TYPES = frozenset(
    {
        "issuetype",
        "priority",
        "user",
        "resolution",
        "securitylevel",
        "group",
        "version",
        "component",
    }
)
_KEYED_TYPES = frozenset({"project", "issuelink"})
_NAMED_ITEM_TYPES = frozenset({"component", "group", "user", "version"})


class ValueType(str, Enum):
    """Identifier used when referring to another resource in a write body."""

    KEY = "key"
    NAME = "name"
    ID = "id"
    VALUE = "value"


class ValueTuple(NamedTuple):
    """A value paired with the identifier type the server should match it by.

    ``ValueTuple(ValueType.ID, "10000")`` becomes ``{"id": "10000"}``
    regardless of the key the field would normally use.
    """

    type: ValueType | str
    value: Any

    def to_json(self) -> dict[str, Any]:
        key = self.type.value if isinstance(self.type, ValueType) else self.type
        return {key: self.value}


class FieldOperation(NamedTuple):
    """A single additive or subtractive edit for an update request."""

    name: str
    value: Any


class ApiField(NamedTuple):
    """One row of a model's JSON field table.

    Attributes:
        key: The JSON key in the API payload
        coerce: Reader converting the raw value into the attribute type
        writable: Whether the field is sent back by ``to_api_dict``
        dump: Converter used when writing the value back to JSON
    """

    key: str
    coerce: Callable[[Any], Any]
    writable: bool = False
    dump: Callable[[Any], Any] | None = None


#
# Read direction
#


def get_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def get_integer(value: Any) -> int | None:
    """Return ``value`` if it is an integer, else None.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def get_identifier(value: Any) -> str | int | None:
    """Resource ids are strings in REST v2 and integers in the Agile API."""
    if isinstance(value, str):
        return value
    return get_integer(value)


def get_double(value: Any) -> float | None:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    return None


def get_boolean(value: Any) -> bool:
    """True only for the JSON literal ``true``. The string "true" is False."""
    return value is True


def get_date(value: Any) -> date | None:
    """Parse a ``YYYY-MM-DD`` value.

    Datetime strings are accepted and truncated to their date part.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.strptime(value[:10], DATE_FORMAT).date()
    except ValueError:
        logger.debug(f"Unparseable date value: {value!r}")
        return None


def get_datetime(value: Any) -> datetime | None:
    """Parse a Jira timestamp such as ``2024-01-01T10:00:00.000+0000``."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.strptime(value, DATETIME_FORMAT)
    except ValueError:
        logger.debug(f"Unparseable datetime value: {value!r}")
        return None


def get_iso_datetime(value: Any) -> datetime | None:
    """Parse any ISO 8601 timestamp, as used by the Agile API."""
    if not isinstance(value, str):
        return None
    return parse_date(value)


def get_string_array(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def get_integer_array(value: Any) -> list[int]:
    if not isinstance(value, list):
        return []
    return [item for item in value if get_integer(item) is not None]


def get_map(value: Any) -> dict[str, Any] | None:
    return dict(value) if isinstance(value, Mapping) else None


def _resolve(model: Any) -> Any:
    # Zero-argument callables defer the lookup for self-referencing models
    return model if isinstance(model, type) else model()


def resource(model: Any) -> Callable[[Any], Any]:
    """Build a reader that constructs a nested model from a JSON object.

    Args:
        model: An ``ApiModel`` subclass, or a zero-argument callable
            returning one

    Returns:
        A coercer yielding a model instance, or None for non-objects
    """

    def coerce(value: Any) -> Any:
        if not isinstance(value, Mapping):
            return None
        return _resolve(model).from_api_response(value)

    return coerce


def resource_array(model: Any) -> Callable[[Any], list[Any]]:
    """Build a reader that constructs a list of nested models.

    Non-array input yields an empty list and non-object items are skipped.
    """

    def coerce(value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        target = _resolve(model)
        return [
            target.from_api_response(item)
            for item in value
            if isinstance(item, Mapping)
        ]

    return coerce


#
# Write direction
#


def format_date(value: date | str | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.strftime(DATE_FORMAT)


def format_datetime(value: datetime | str | None) -> str | None:
    """Format a datetime the way Jira expects, with millisecond precision.

    Naive datetimes are treated as UTC.
    """
    if value is None or isinstance(value, str):
        return value
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (
        value.strftime("%Y-%m-%dT%H:%M:%S.")
        + f"{value.microsecond // 1000:03d}"
        + value.strftime("%z")
    )


def get_field_metadata(name: str, metadata: Any) -> Mapping[str, Any]:
    """Look up a field in create/edit metadata.

    Raises:
        MalformedMetadataError: If the metadata is not an object or the
            field is absent (unknown or read-only)
    """
    if not isinstance(metadata, Mapping):
        raise MalformedMetadataError("Field metadata is malformed")
    field = metadata.get(name)
    if not isinstance(field, Mapping):
        raise MalformedMetadataError(f"Field '{name}' does not exist or is read-only")
    return field


def get_field_schema(name: str, metadata: Any) -> Mapping[str, Any]:
    """Return the ``schema`` object of a field, which must carry a type."""
    field = get_field_metadata(name, metadata)
    schema = field.get("schema")
    if not isinstance(schema, Mapping):
        raise MalformedMetadataError(f"Field '{name}' is missing schema metadata")
    if not schema.get("type"):
        raise MalformedMetadataError(f"Field '{name}' is missing type information")
    return schema


def _to_reference(value: Any, key: str) -> Any:
    if isinstance(value, ValueTuple):
        return value.to_json()
    if isinstance(value, Mapping):
        return dict(value)
    return {key: str(value)}


def _to_json_array(
    name: str, value: Any, item_type: str | None, custom: str | None
) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str | bytes | Mapping) or not isinstance(value, Iterable):
        raise ValueError(f"Field '{name}' expects a list of values")

    result: list[Any] = []
    for item in value:
        operation = None
        if isinstance(item, FieldOperation):
            operation, item = item.name, item.value

        if item_type in _NAMED_ITEM_TYPES:
            converted = _to_reference(item, ValueType.NAME.value)
        elif item_type == "option" or (
            item_type == "string"
            and custom in (CUSTOM_TYPE_MULTISELECT, CUSTOM_TYPE_MULTICHECKBOXES)
        ):
            converted = _to_reference(item, ValueType.VALUE.value)
        elif item_type == "string":
            converted = str(item)
        elif isinstance(item, ValueTuple):
            converted = item.to_json()
        else:
            converted = item

        result.append({operation: converted} if operation else converted)
    return result


def to_json(name: str, value: Any, metadata: Any) -> Any:
    """
    Convert a value into the JSON shape a field expects on write.

    Args:
        name: The field id, e.g. ``summary`` or ``customfield_10010``
        value: The caller supplied value
        metadata: The ``fields`` object from create or edit metadata

    Returns:
        A JSON-serializable value for the request body

    Raises:
        MalformedMetadataError: If the field is missing from the metadata,
            its schema is incomplete, or its type is not supported
        ValueError: If the value cannot be converted to the declared type
    """
    schema = get_field_schema(name, metadata)
    schema_type = schema.get("type")
    custom = schema.get("custom")

    if schema_type == "array":
        return _to_json_array(name, value, schema.get("items"), custom)

    if value is None:
        return None

    if schema_type == "date":
        return format_date(value)
    if schema_type == "datetime":
        return format_datetime(value)
    if schema_type in _NAMED_TYPES:
        return _to_reference(value, ValueType.NAME.value)
    if schema_type in _KEYED_TYPES:
        return _to_reference(value, ValueType.KEY.value)
    if schema_type == "option":
        return _to_reference(value, ValueType.VALUE.value)
    if schema_type == "string":
        if custom in (CUSTOM_TYPE_SELECT, CUSTOM_TYPE_RADIO) or isinstance(
            value, ValueTuple
        ):
            return _to_reference(value, ValueType.VALUE.value)
        if isinstance(value, Mapping):
            return dict(value)
        return str(value)
    if schema_type == "number":
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"Field '{name}' expects a numeric value")
        return value
    if schema_type == "timetracking":
        if hasattr(value, "to_api_dict"):
            return value.to_api_dict()
        if isinstance(value, Mapping):
            return dict(value)
        raise ValueError(f"Field '{name}' expects a time tracking value")
    if schema_type == "any":
        return value

    raise MalformedMetadataError(
        f"Field '{name}' has unsupported type '{schema_type}'"
    )
