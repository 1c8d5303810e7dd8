"""
Stub Transport Adapter.

Logs emails instead of delivering them.
Used for local development and as the baseline transport in tests.

Key behaviors:
- Drains the whole message, like any real backend
- Logs one line per email: "<message_id>: from=<sender> to=<recipients>"
- Returns SENT (or FAILED when configured to fail or the body cannot be read)
- Stores delivery records in memory for test assertions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from mailcore.core.message import SendableEmail
from mailcore.core.ports.transport import TransportResult

logger = logging.getLogger(__name__)

STUB_FAILURE_ERROR = "Stub transport configured to fail"


@dataclass
class DeliveryRecord:
    """Record of a stubbed delivery for test assertions."""

    message_id: str
    sender: str | None
    recipients: list[str]
    size: int
    delivered_at: datetime


@dataclass
class StubTransport:
    """
    Transport that only logs.

    Satisfies the Transport protocol with TransportResult as result type.
    """

    succeed: bool = True
    log_level: int = logging.INFO

    # In-memory storage for test assertions
    deliveries: list[DeliveryRecord] = field(default_factory=list)

    @classmethod
    def positive(cls) -> StubTransport:
        """Stub that reports every delivery as sent."""
        return cls(succeed=True)

    @classmethod
    def negative(cls) -> StubTransport:
        """Stub that reports every delivery as failed."""
        return cls(succeed=False)

    def send(self, email: SendableEmail) -> TransportResult:
        envelope = email.envelope
        message_id = email.message_id
        sender = str(envelope.from_) if envelope.from_ is not None else None
        recipients = [str(address) for address in envelope.to]

        message = email.take_message()
        try:
            size = len(message.read_all())
        except OSError as e:
            logger.warning(f"Failed to read message {message_id}: {e}")
            return TransportResult.failed(
                message_id=message_id,
                recipients=recipients,
                error=str(e),
                metadata={"adapter": "stub"},
            )

        self.deliveries.append(
            DeliveryRecord(
                message_id=message_id,
                sender=sender,
                recipients=recipients,
                size=size,
                delivered_at=datetime.now(UTC),
            )
        )

        logger.log(
            self.log_level,
            "%s: from=<%s> to=<%s>",
            message_id,
            sender or "",
            ", ".join(recipients),
        )

        if not self.succeed:
            logger.warning(f"Stub delivery of {message_id} reported as failed")
            return TransportResult.failed(
                message_id=message_id,
                recipients=recipients,
                error=STUB_FAILURE_ERROR,
                metadata={"adapter": "stub"},
            )

        return TransportResult.success(
            message_id=message_id,
            recipients=recipients,
            metadata={"adapter": "stub"},
        )

    # --- Test Helper Methods ---

    def last_delivery(self) -> DeliveryRecord | None:
        """Get the most recent delivery."""
        return self.deliveries[-1] if self.deliveries else None

    def deliveries_to(self, address: str) -> list[DeliveryRecord]:
        """Get all deliveries that included a given recipient."""
        return [d for d in self.deliveries if address in d.recipients]

    def clear(self) -> None:
        """Clear all stored deliveries (for test isolation)."""
        self.deliveries.clear()

    @property
    def delivery_count(self) -> int:
        return len(self.deliveries)


# --- Factory Function ---


def create_stub_transport(
    succeed: bool = True,
    log_level: int = logging.INFO,
) -> StubTransport:
    """
    Create a stub transport.

    Args:
        succeed: Whether deliveries are reported as sent
        log_level: Logging level for delivery lines

    Returns:
        Configured StubTransport
    """
    return StubTransport(succeed=succeed, log_level=log_level)
