from mailcore.config.loader import load_settings
from mailcore.config.models import (
    FileTransportSettings,
    LoggingSettings,
    MailSettings,
    StubTransportSettings,
    TransportSettings,
)

__all__ = [
    "FileTransportSettings",
    "LoggingSettings",
    "MailSettings",
    "StubTransportSettings",
    "TransportSettings",
    "load_settings",
]
