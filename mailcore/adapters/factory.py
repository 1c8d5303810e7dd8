"""
Transport factory.

Builds the delivery backend selected in TransportSettings.
"""

from __future__ import annotations

import logging

from mailcore.adapters.file_transport import create_file_transport
from mailcore.adapters.stub_transport import create_stub_transport
from mailcore.config.models import TransportSettings
from mailcore.core.ports.transport import Transport, TransportResult

logger = logging.getLogger(__name__)


def create_transport(settings: TransportSettings) -> Transport[TransportResult]:
    """
    Create the configured transport.

    Args:
        settings: Transport section of MailSettings

    Returns:
        StubTransport or FileTransport
    """
    if settings.backend == "file":
        # Guaranteed by TransportSettings validation
        assert settings.file is not None
        logger.debug(f"Using file transport in {settings.file.directory}")
        return create_file_transport(settings.file.directory)

    logger.debug("Using stub transport")
    return create_stub_transport(
        succeed=settings.stub.succeed,
        log_level=logging.getLevelName(settings.stub.log_level),
    )
