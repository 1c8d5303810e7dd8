# mailcore: Core
# Value types, message payloads and the transport port

from mailcore.core.entities import EmailAddress, Envelope
from mailcore.core.errors import (
    EmailError,
    ErrorKind,
    InvalidEmailAddressError,
    MessageConsumedError,
    MessageContentError,
    MissingFromError,
    MissingToError,
)
from mailcore.core.message import ByteSource, Message, MessageKind, SendableEmail

__all__ = [
    "ByteSource",
    "EmailAddress",
    "EmailError",
    "Envelope",
    "ErrorKind",
    "InvalidEmailAddressError",
    "Message",
    "MessageConsumedError",
    "MessageContentError",
    "MessageKind",
    "MissingFromError",
    "MissingToError",
    "SendableEmail",
]
