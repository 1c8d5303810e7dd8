"""
Pydantic models for persisting envelopes and emails.

Field layout follows the in-memory types: an address is a plain string, an
envelope is {"forward_path": [...], "reverse_path": ... | null}.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from mailcore.core.entities import EmailAddress, Envelope


class EnvelopeModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    forward_path: list[str]
    reverse_path: str | None = None

    @classmethod
    def from_envelope(cls, envelope: Envelope) -> EnvelopeModel:
        return cls(
            forward_path=[str(address) for address in envelope.to],
            reverse_path=str(envelope.from_) if envelope.from_ is not None else None,
        )

    def to_envelope(self) -> Envelope:
        """Rebuild an Envelope, running the usual construction checks."""
        sender = (
            EmailAddress.parse(self.reverse_path)
            if self.reverse_path is not None
            else None
        )
        return Envelope.new(sender, [EmailAddress.parse(a) for a in self.forward_path])


class SerializedEmail(BaseModel):
    """A drained email as written by FileTransport."""

    model_config = ConfigDict(frozen=True)

    envelope: EnvelopeModel
    message_id: str
    message: str

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> SerializedEmail:
        return cls.model_validate_json(data)
