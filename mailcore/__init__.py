"""
mailcore: envelopes, message payloads and the transport contract.

Build an Envelope, wrap the body in a SendableEmail and hand it to a
Transport:

    envelope = Envelope.new(EmailAddress("a@example.com"), [EmailAddress("b@example.com")])
    email = SendableEmail(envelope, "id-1@example.com", b"Hello")
    result = StubTransport().send(email)
"""

from mailcore.adapters import FileTransport, StubTransport, create_transport
from mailcore.core import (
    ByteSource,
    EmailAddress,
    EmailError,
    Envelope,
    ErrorKind,
    InvalidEmailAddressError,
    Message,
    MessageConsumedError,
    MessageContentError,
    MessageKind,
    MissingFromError,
    MissingToError,
    SendableEmail,
)
from mailcore.core.ports import Transport, TransportResult, TransportStatus

__version__ = "0.9.0"

__all__ = [
    "ByteSource",
    "EmailAddress",
    "EmailError",
    "Envelope",
    "ErrorKind",
    "FileTransport",
    "InvalidEmailAddressError",
    "Message",
    "MessageConsumedError",
    "MessageContentError",
    "MessageKind",
    "MissingFromError",
    "MissingToError",
    "SendableEmail",
    "StubTransport",
    "Transport",
    "TransportResult",
    "TransportStatus",
    "create_transport",
]
