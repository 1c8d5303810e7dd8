"""
Transport Interface.

Protocol-based interface for delivery backends. A transport takes full
ownership of a SendableEmail and performs the actual handoff.

Contract for every implementation:
- send() consumes the email; callers must not reuse it afterwards
- The message is drained completely before send() returns
- Retries need a freshly built SendableEmail; a streamed body cannot be
  replayed
- Side effects (files, processes, sockets) belong to the backend

Implementations:
1. StubTransport: Logs and records deliveries in memory (dev/test)
2. FileTransport: Dumps each email as JSON into a directory

The protocol is generic over the result type so backends may define their
own. The bundled backends all return TransportResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable

from mailcore.core.message import SendableEmail

ResultT_co = TypeVar("ResultT_co", covariant=True)


class TransportStatus(Enum):
    """Delivery outcome."""

    SENT = "sent"
    FAILED = "failed"


@dataclass
class TransportResult:
    """Result of a delivery attempt."""

    status: TransportStatus
    message_id: str
    recipients: list[str] = field(default_factory=list)
    error: str | None = None
    sent_at: datetime | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is TransportStatus.SENT

    @classmethod
    def success(
        cls,
        message_id: str,
        recipients: list[str],
        metadata: dict[str, str] | None = None,
    ) -> TransportResult:
        """Create a successful delivery result."""
        return cls(
            status=TransportStatus.SENT,
            message_id=message_id,
            recipients=recipients,
            sent_at=datetime.now(UTC),
            metadata=metadata or {},
        )

    @classmethod
    def failed(
        cls,
        message_id: str,
        recipients: list[str],
        error: str,
        metadata: dict[str, str] | None = None,
    ) -> TransportResult:
        """Create a failed delivery result."""
        return cls(
            status=TransportStatus.FAILED,
            message_id=message_id,
            recipients=recipients,
            error=error,
            metadata=metadata or {},
        )


@runtime_checkable
class Transport(Protocol[ResultT_co]):
    """
    Delivery backend interface.

    Implementations:
    - StubTransport: Logs only (dev/test)
    - FileTransport: Writes JSON dumps
    """

    def send(self, email: SendableEmail) -> ResultT_co:
        """
        Deliver an email.

        Args:
            email: The email to deliver; ownership passes to the transport

        Returns:
            Backend-defined result. Bundled backends return TransportResult
            and report delivery failures through it instead of raising.
        """
        ...
