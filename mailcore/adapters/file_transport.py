"""
File Transport Adapter.

Writes each email to <directory>/<message_id>.json instead of delivering it.
The dump holds the envelope, the message id and the body as UTF-8 text.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from mailcore.core.errors import MessageContentError
from mailcore.core.message import SendableEmail
from mailcore.core.ports.transport import TransportResult
from mailcore.core.serialization import EnvelopeModel, SerializedEmail

logger = logging.getLogger(__name__)


class FileTransport:
    def __init__(self, directory: str | os.PathLike[str]):
        self.directory = Path(directory).resolve()
        if not self.directory.exists():
            os.makedirs(self.directory, exist_ok=True)

    def _target_path(self, message_id: str) -> Path:
        if not message_id:
            raise ValueError("Message id is empty")
        # Prevent traversal
        target = (self.directory / f"{message_id}.json").resolve()
        if target.parent != self.directory:
            raise ValueError(f"Path traversal attempt detected: {message_id}")
        return target

    def send(self, email: SendableEmail) -> TransportResult:
        """
        Dump the email as JSON.

        The message is always drained, even when the target path is
        rejected.
        """
        message_id = email.message_id
        envelope = EnvelopeModel.from_envelope(email.envelope)
        recipients = list(envelope.forward_path)

        try:
            body = email.message_to_string()
        except MessageContentError as e:
            logger.warning(f"Failed to read message {message_id}: {e}")
            return TransportResult.failed(message_id, recipients, str(e))

        try:
            target = self._target_path(message_id)
        except ValueError as e:
            logger.warning(f"Rejected message id {message_id!r}: {e}")
            return TransportResult.failed(message_id, recipients, str(e))

        serialized = SerializedEmail(
            envelope=envelope,
            message_id=message_id,
            message=body,
        )

        try:
            with open(target, "w", encoding="utf-8") as f:
                f.write(serialized.to_json())
        except OSError as e:
            logger.warning(f"Failed to write {target}: {e}")
            return TransportResult.failed(message_id, recipients, str(e))

        logger.info(f"{message_id}: written to {target}")
        return TransportResult.success(
            message_id,
            recipients,
            metadata={"adapter": "file", "path": str(target)},
        )

    @staticmethod
    def read_email(path: str | os.PathLike[str]) -> SerializedEmail:
        """
        Load a dump written by send().

        Raises FileNotFoundError if the file is missing.
        Raises ValueError if the content is not a valid dump.
        """
        target = Path(path)
        if not target.exists():
            raise FileNotFoundError(f"File not found: {path}")
        with open(target, encoding="utf-8") as f:
            content = f.read()
        try:
            return SerializedEmail.from_json(content)
        except ValidationError as e:
            raise ValueError(f"Invalid email dump {path}:\n{e}") from e


def create_file_transport(directory: str | os.PathLike[str]) -> FileTransport:
    """Create a file transport writing into `directory`."""
    return FileTransport(directory)
