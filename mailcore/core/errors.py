"""
Error types for envelope construction and message content.

Two disjoint families live here:

- EmailError and its subclasses: construction/validation failures raised
  by EmailAddress and Envelope. Recoverable, returned to the caller.
- MessageContentError: failures while draining a message body (read errors,
  invalid UTF-8). An OSError, never an EmailError.

MissingFromError and InvalidEmailAddressError are not raised by the current
constructors. They are kept so stricter policies (mandatory sender, address
syntax checks) can be added without changing the public error surface.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of envelope validation failures."""

    MISSING_FROM = "missing_from"
    MISSING_TO = "missing_to"
    INVALID_EMAIL_ADDRESS = "invalid_email_address"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorKind.MISSING_FROM: "missing source address, invalid envelope",
    ErrorKind.MISSING_TO: "missing destination address, invalid envelope",
    ErrorKind.INVALID_EMAIL_ADDRESS: "invalid email address",
}


class EmailError(Exception):
    """Base exception for envelope validation errors."""

    kind: ErrorKind

    def __init__(self) -> None:
        super().__init__(self.kind.description)

    @property
    def description(self) -> str:
        return self.kind.description

    @staticmethod
    def from_kind(kind: ErrorKind) -> EmailError:
        """Build the exception matching an error kind."""
        return _ERRORS_BY_KIND[kind]()


class MissingFromError(EmailError):
    """Envelope has no sender where one is required."""

    kind = ErrorKind.MISSING_FROM


class MissingToError(EmailError):
    """Envelope has no recipients."""

    kind = ErrorKind.MISSING_TO


class InvalidEmailAddressError(EmailError):
    """Address text failed validation."""

    kind = ErrorKind.INVALID_EMAIL_ADDRESS


_ERRORS_BY_KIND: dict[ErrorKind, type[EmailError]] = {
    ErrorKind.MISSING_FROM: MissingFromError,
    ErrorKind.MISSING_TO: MissingToError,
    ErrorKind.INVALID_EMAIL_ADDRESS: InvalidEmailAddressError,
}


class MessageContentError(OSError):
    """Message body could not be read or decoded."""


class MessageConsumedError(RuntimeError):
    """The message of a SendableEmail was already taken."""

    def __init__(self, message_id: str) -> None:
        self.message_id = message_id
        super().__init__(f"Message {message_id!r} has already been consumed")
