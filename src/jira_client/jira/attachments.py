"""Attachment operations for Jira API."""

import logging
import os
from collections.abc import Iterable
from contextlib import ExitStack
from typing import BinaryIO

from ..exceptions import JiraOperationError
from ..models.jira import JiraAttachment
from .client import JiraClient
from .constants import NO_CHECK_HEADERS

# Configure logging
logger = logging.getLogger("jira-client")

# A file path, or a (filename, content) pair for in-memory uploads
AttachmentSource = str | tuple[str, bytes | BinaryIO]


class AttachmentsMixin(JiraClient):
    """Mixin for Jira attachment operations."""

    def get_attachment(self, attachment_id: str) -> JiraAttachment:
        """Get attachment metadata by id."""
        return self._get_resource(
            JiraAttachment,
            self._api("attachment", attachment_id),
            f"retrieve attachment {attachment_id}",
        )

    def add_attachment(
        self, issue_key: str, attachment: AttachmentSource
    ) -> list[JiraAttachment]:
        """
        Upload a file as an attachment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            attachment: Path of the file to upload, or a ``(filename, content)``
                pair where content is bytes or a binary stream

        Returns:
            The created attachments
        """
        return self.add_attachments(issue_key, [attachment])

    def add_attachments(
        self, issue_key: str, attachments: Iterable[AttachmentSource]
    ) -> list[JiraAttachment]:
        """
        Upload several files to an issue in one request.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            attachments: File paths and/or ``(filename, content)`` pairs

        Returns:
            The created attachments, in upload order

        Raises:
            ValueError: If nothing is given, a file does not exist or a
                pair has no filename
            JiraOperationError: If the upload fails
        """
        sources = list(attachments)
        if not sources:
            raise ValueError("No files were given to attach")
        for source in sources:
            if isinstance(source, tuple):
                if not source[0]:
                    raise ValueError("In-memory attachments require a filename")
            elif not os.path.isfile(source):
                raise ValueError(f"File not found: {os.path.abspath(source)}")

        with ExitStack() as stack:
            files: list[tuple[str, tuple[str, bytes | BinaryIO]]] = []
            for source in sources:
                if isinstance(source, tuple):
                    files.append(("file", source))
                else:
                    path = os.path.abspath(source)
                    stream = stack.enter_context(open(path, "rb"))
                    files.append(("file", (os.path.basename(path), stream)))
            logger.info(f"Uploading {len(files)} attachment(s) to {issue_key}")
            response = self._request(
                "post",
                self._api("issue", issue_key, "attachments"),
                f"add attachments to issue {issue_key}",
                files=files,
                headers=NO_CHECK_HEADERS,
                expect=list,
            )

        return [JiraAttachment.from_api_response(item) for item in response]

    def remove_attachment(self, attachment_id: str) -> None:
        """Delete an attachment by id."""
        self._request(
            "delete",
            self._api("attachment", attachment_id),
            f"remove attachment {attachment_id}",
            expect=None,
        )

    def download_attachment(self, attachment: JiraAttachment) -> bytes:
        """
        Download the content of an attachment.

        Args:
            attachment: The attachment, as returned with an issue or by id

        Returns:
            The raw file content

        Raises:
            JiraOperationError: If the attachment has no content URL or the
                download fails
        """
        if not attachment.content_url:
            raise JiraOperationError(
                f"Attachment {attachment.id} has no content URL to download"
            )

        action = f"download attachment {attachment.id}"
        try:
            logger.info(f"Downloading attachment from {attachment.content_url}")
            response = self.jira._session.get(attachment.content_url, stream=True)
            response.raise_for_status()
            return b"".join(response.iter_content(chunk_size=8192))
        except Exception as e:
            logger.error(f"Error while trying to {action}: {str(e)}")
            raise JiraOperationError(f"Failed to {action}", e) from e
