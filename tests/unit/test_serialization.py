"""
Serialization model tests.

Addresses serialize as plain strings; envelopes keep the in-memory layout.
"""

import json

import pytest
from pydantic import ValidationError

from mailcore.core.entities import EmailAddress, Envelope
from mailcore.core.errors import MissingToError
from mailcore.core.serialization import EnvelopeModel, SerializedEmail


class TestEnvelopeModel:
    def test_from_envelope_layout(self, envelope: Envelope) -> None:
        model = EnvelopeModel.from_envelope(envelope)
        assert model.model_dump() == {
            "forward_path": ["alice@example.com", "bob@example.com"],
            "reverse_path": "noreply@example.com",
        }

    def test_null_sender(self) -> None:
        envelope = Envelope.new(None, [EmailAddress("a@x")])
        assert EnvelopeModel.from_envelope(envelope).reverse_path is None

    def test_to_envelope_preserves_order(self) -> None:
        model = EnvelopeModel(forward_path=["b@x", "a@x"], reverse_path="s@x")
        envelope = model.to_envelope()
        assert envelope == Envelope.new(
            EmailAddress("s@x"), [EmailAddress("b@x"), EmailAddress("a@x")]
        )

    def test_reverse_path_optional(self) -> None:
        model = EnvelopeModel.model_validate({"forward_path": ["a@x"]})
        assert model.to_envelope().from_ is None

    def test_empty_recipients_rejected_on_conversion(self) -> None:
        model = EnvelopeModel(forward_path=[])
        with pytest.raises(MissingToError):
            model.to_envelope()

    def test_missing_forward_path_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            EnvelopeModel.model_validate({"reverse_path": "s@x"})


class TestSerializedEmail:
    def test_json_round_trip(self, envelope: Envelope) -> None:
        email = SerializedEmail(
            envelope=EnvelopeModel.from_envelope(envelope),
            message_id="id-1",
            message="Hello",
        )
        restored = SerializedEmail.from_json(email.to_json())
        assert restored == email

    def test_json_shape(self, envelope: Envelope) -> None:
        email = SerializedEmail(
            envelope=EnvelopeModel.from_envelope(envelope),
            message_id="id-1",
            message="Hello",
        )
        data = json.loads(email.to_json())
        assert set(data) == {"envelope", "message_id", "message"}
        assert isinstance(data["envelope"]["forward_path"][0], str)

    def test_from_json_bytes(self) -> None:
        raw = b'{"envelope": {"forward_path": ["a@x"]}, "message_id": "m", "message": ""}'
        assert SerializedEmail.from_json(raw).message_id == "m"
