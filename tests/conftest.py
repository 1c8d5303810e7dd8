import pytest

from mailcore.core.entities import EmailAddress, Envelope


@pytest.fixture
def outbox_dir(tmp_path):
    return tmp_path / "outbox"


@pytest.fixture
def sender():
    return EmailAddress("noreply@example.com")


@pytest.fixture
def recipients():
    return [EmailAddress("alice@example.com"), EmailAddress("bob@example.com")]


@pytest.fixture
def envelope(sender, recipients):
    """Envelope with a sender and two recipients."""
    return Envelope.new(sender, recipients)
