# mailcore: Adapters
# Delivery backends implementing the Transport port

from mailcore.adapters.factory import create_transport
from mailcore.adapters.file_transport import FileTransport, create_file_transport
from mailcore.adapters.stub_transport import (
    DeliveryRecord,
    StubTransport,
    create_stub_transport,
)

__all__ = [
    "DeliveryRecord",
    "FileTransport",
    "StubTransport",
    "create_file_transport",
    "create_stub_transport",
    "create_transport",
]
