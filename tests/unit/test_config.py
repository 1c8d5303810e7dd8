"""
Configuration loading tests.

Covers YAML parsing, pydantic validation and the transport factory.
"""

import logging
from pathlib import Path

import pytest

from mailcore.adapters.factory import create_transport
from mailcore.adapters.file_transport import FileTransport
from mailcore.adapters.stub_transport import StubTransport
from mailcore.config.loader import load_settings
from mailcore.config.models import MailSettings, TransportSettings


def write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "mail.yaml"
    path.write_text(content)
    return path


class TestLoadSettings:
    def test_full_config(self, tmp_path: Path) -> None:
        path = write_config(
            tmp_path,
            f"""
default_sender: noreply@example.com
logging:
  level: debug
transport:
  backend: file
  file:
    directory: {tmp_path / "outbox"}
""",
        )
        settings = load_settings(path)

        assert settings.default_sender == "noreply@example.com"
        assert settings.logging.level == "DEBUG"
        assert settings.transport.backend == "file"
        assert settings.transport.file is not None
        assert settings.transport.file.directory == tmp_path / "outbox"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(write_config(tmp_path, ""))
        assert settings == MailSettings()
        assert settings.transport.backend == "stub"
        assert settings.transport.stub.succeed is True
        assert settings.logging.level == "INFO"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, "transport: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_settings(path)

    def test_unknown_backend(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, "transport:\n  backend: smtp\n")
        with pytest.raises(ValueError, match="Config validation failed"):
            load_settings(path)

    def test_file_backend_requires_section(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, "transport:\n  backend: file\n")
        with pytest.raises(ValueError, match="transport.file is required"):
            load_settings(path)

    def test_invalid_log_level(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, "logging:\n  level: loud\n")
        with pytest.raises(ValueError):
            load_settings(path)


class TestCreateTransport:
    def test_default_is_stub(self) -> None:
        transport = create_transport(TransportSettings())
        assert isinstance(transport, StubTransport)
        assert transport.succeed is True
        assert transport.log_level == logging.INFO

    def test_stub_settings_applied(self) -> None:
        settings = TransportSettings.model_validate(
            {"backend": "stub", "stub": {"succeed": False, "log_level": "warning"}}
        )
        transport = create_transport(settings)
        assert isinstance(transport, StubTransport)
        assert transport.succeed is False
        assert transport.log_level == logging.WARNING

    def test_file_backend(self, tmp_path: Path) -> None:
        settings = TransportSettings.model_validate(
            {"backend": "file", "file": {"directory": str(tmp_path / "out")}}
        )
        transport = create_transport(settings)
        assert isinstance(transport, FileTransport)
        assert transport.directory == (tmp_path / "out").resolve()
