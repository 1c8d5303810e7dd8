from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, Field, model_validator


def _upper(value: object) -> object:
    return value.upper() if isinstance(value, str) else value


# Level names are accepted in any case
LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], BeforeValidator(_upper)
]
BackendType = Literal["stub", "file"]


class LoggingSettings(BaseModel):
    level: LogLevel = "INFO"


class StubTransportSettings(BaseModel):
    succeed: bool = True
    log_level: LogLevel = "INFO"


class FileTransportSettings(BaseModel):
    directory: Path


class TransportSettings(BaseModel):
    backend: BackendType = "stub"
    stub: StubTransportSettings = Field(default_factory=StubTransportSettings)
    file: FileTransportSettings | None = None

    @model_validator(mode="after")
    def _backend_section_present(self) -> "TransportSettings":
        if self.backend == "file" and self.file is None:
            raise ValueError("transport.file is required when backend is 'file'")
        return self


class MailSettings(BaseModel):
    default_sender: str | None = None
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    transport: TransportSettings = Field(default_factory=TransportSettings)
