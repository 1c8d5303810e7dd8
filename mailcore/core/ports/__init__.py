# mailcore: Ports (Protocol Interfaces)
# Abstract interfaces for delivery backends; no implementations here

from mailcore.core.ports.transport import (
    Transport,
    TransportResult,
    TransportStatus,
)

__all__ = [
    "Transport",
    "TransportResult",
    "TransportStatus",
]
