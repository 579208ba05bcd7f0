"""Constants specific to Jira operations."""

# Fields returned by the CLI and search helpers when none are requested
DEFAULT_READ_JIRA_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "status",
    "assignee",
    "reporter",
    "labels",
    "priority",
    "created",
    "updated",
    "issuetype",
)

# Expand directives needed to read writable field metadata
CREATE_METADATA_EXPAND = "projects.issuetypes.fields"
TRANSITION_FIELDS_EXPAND = "transitions.fields"

SUBTASK_ISSUE_TYPE = "Sub-task"

# Jira rejects worklogs shorter than one minute
MINIMUM_WORKLOG_SECONDS = 60

DEFAULT_PAGE_SIZE = 50

# Attachment uploads bypass XSRF checks with this header
NO_CHECK_HEADERS = {"X-Atlassian-Token": "no-check"}
