"""
Message payloads and the sendable email aggregate.

A Message is either a STREAM (a byte source owned by the message) or a
BUFFER (an in-memory byte string behind a BytesIO cursor). Both expose the
same read() primitive: up to `size` bytes per call, b"" at end of stream.

A stream is generally not re-readable. Once drained, further reads return
b"" rather than the original content again.

SendableEmail bundles an Envelope, an opaque message id and one Message.
The message can be taken exactly once, by a transport (take_message) or by
message_to_string. A second attempt raises MessageConsumedError.

Construction and consumption commonly happen on different threads; the
single-owner rule above is what keeps that safe, so a SendableEmail should
be handed off, not shared.
"""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Protocol, runtime_checkable

from mailcore.core.entities import Envelope
from mailcore.core.errors import MessageConsumedError, MessageContentError

DEFAULT_CHUNK_SIZE = 8192


@runtime_checkable
class ByteSource(Protocol):
    """Anything with a binary read(size) method (files, sockets, BytesIO)."""

    def read(self, size: int = -1, /) -> bytes:
        ...


class MessageKind(Enum):
    """Shape of a message payload."""

    STREAM = "stream"
    BUFFER = "buffer"


class _ChunkReader:
    """Adapts an iterable of byte chunks to the ByteSource interface."""

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self._chunks = iter(chunks)
        self._pending = b""
        self._exhausted = False

    def _fill(self) -> None:
        # Skip empty chunks so they are not mistaken for end of stream
        while not self._pending and not self._exhausted:
            try:
                self._pending = bytes(next(self._chunks))
            except StopIteration:
                self._exhausted = True

    def read(self, size: int = -1, /) -> bytes:
        if size is None or size < 0:
            parts = [self._pending]
            self._pending = b""
            if not self._exhausted:
                parts.extend(bytes(chunk) for chunk in self._chunks)
                self._exhausted = True
            return b"".join(parts)

        self._fill()
        data, self._pending = self._pending[:size], self._pending[size:]
        return data


class Message:
    """
    Email body as a single-pass byte source.

    Build one with Message.from_bytes() or Message.from_reader().
    """

    __slots__ = ("_kind", "_source")

    def __init__(self, kind: MessageKind, source: ByteSource) -> None:
        self._kind = kind
        self._source = source

    @classmethod
    def from_bytes(cls, data: bytes) -> Message:
        """Buffered message; the cursor starts at offset 0."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Message body must be bytes-like, got {type(data).__name__}"
            )
        return cls(MessageKind.BUFFER, io.BytesIO(bytes(data)))

    @classmethod
    def from_reader(cls, source: ByteSource | Iterable[bytes]) -> Message:
        """
        Streaming message.

        Args:
            source: Object with a binary read(size) method, or an iterable
                yielding bytes chunks. The message takes ownership of it.
        """
        if isinstance(source, (bytes, bytearray, memoryview, str)):
            raise TypeError("Use Message.from_bytes() for in-memory payloads")
        if not isinstance(source, ByteSource):
            source = _ChunkReader(source)
        return cls(MessageKind.STREAM, source)

    @property
    def kind(self) -> MessageKind:
        return self._kind

    def read(self, size: int = -1) -> bytes:
        """
        Read the next chunk of the body.

        Returns b"" at end of stream. Read errors surface as OSError.

        Raises:
            BlockingIOError: If a non-blocking source has no data ready.
            OSError: If the source fails or is closed.
        """
        try:
            data = self._source.read(size)
        except ValueError as exc:
            # Closed file objects raise ValueError
            raise OSError(f"Message source is not readable: {exc}") from exc
        if data is None:
            raise BlockingIOError("Message source has no data ready")
        return bytes(data)

    def iter_chunks(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield chunks until end of stream."""
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        while chunk := self.read(chunk_size):
            yield chunk

    def read_all(self) -> bytes:
        """Drain the remaining body."""
        return b"".join(self.iter_chunks())

    def __repr__(self) -> str:
        return f"Message(kind={self._kind.value})"


class SendableEmail:
    """
    The unit of work handed to a transport.

    Attributes:
        envelope: Routing information (readable at any time)
        message_id: Opaque identifier, returned exactly as given
    """

    __slots__ = ("_envelope", "_message_id", "_message")

    def __init__(self, envelope: Envelope, message_id: str, message: bytes) -> None:
        self._envelope = envelope
        self._message_id = message_id
        self._message: Message | None = Message.from_bytes(message)

    @classmethod
    def from_reader(
        cls,
        envelope: Envelope,
        message_id: str,
        source: ByteSource | Iterable[bytes],
    ) -> SendableEmail:
        """Build a sendable email whose body is streamed from `source`."""
        email = cls.__new__(cls)
        email._envelope = envelope
        email._message_id = message_id
        email._message = Message.from_reader(source)
        return email

    @property
    def envelope(self) -> Envelope:
        return self._envelope

    @property
    def message_id(self) -> str:
        return self._message_id

    @property
    def consumed(self) -> bool:
        """True once the message has been taken."""
        return self._message is None

    def take_message(self) -> Message:
        """
        Hand over the message for draining.

        Raises:
            MessageConsumedError: If the message was already taken.
        """
        if self._message is None:
            raise MessageConsumedError(self._message_id)
        message, self._message = self._message, None
        return message

    def message_to_string(self) -> str:
        """
        Take the message, drain it and decode it as UTF-8.

        Raises:
            MessageConsumedError: If the message was already taken.
            MessageContentError: If reading fails or the bytes are not UTF-8.
        """
        message = self.take_message()
        try:
            data = message.read_all()
        except OSError as exc:
            raise MessageContentError(
                f"Failed to read message {self._message_id!r}: {exc}"
            ) from exc
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MessageContentError(
                f"Message {self._message_id!r} is not valid UTF-8: {exc}"
            ) from exc

    def __repr__(self) -> str:
        state = "consumed" if self.consumed else "pending"
        return (
            f"SendableEmail(message_id={self._message_id!r}, "
            f"envelope={self._envelope!r}, {state})"
        )
