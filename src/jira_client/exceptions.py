"""Exceptions raised by the Jira client."""


class JiraClientError(Exception):
    """Base class for all errors raised by jira_client."""


class JiraOperationError(JiraClientError):
    """An operation against the Jira API failed.

    This is the single error kind surfaced to callers. It covers both
    transport failures (the HTTP layer raised) and payload-shape failures
    (the response did not have the expected JSON shape).

    Attributes:
        message: Human readable description naming the attempted action
        cause: The underlying exception, if any
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class JiraAuthenticationError(JiraOperationError):
    """Raised when Jira rejects the configured credentials (HTTP 401/403)."""


class EmptyRequestError(JiraOperationError):
    """Raised when a write builder is submitted without any fields."""


class MalformedMetadataError(JiraOperationError):
    """Raised when create/edit metadata cannot describe a requested field."""
