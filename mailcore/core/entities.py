"""
Envelope value types.

EmailAddress wraps a textual address; Envelope pairs an optional sender
(reverse-path) with a non-empty, ordered list of recipients (forward-path).
Both are immutable and compare by value.

Examples:
    Envelope.new(EmailAddress("noreply@example.com"), [EmailAddress("user@example.com")])
    Envelope([EmailAddress("user@example.com")])  # null sender (bounce)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mailcore.core.errors import MissingToError


@dataclass(frozen=True, order=True)
class EmailAddress:
    """
    A single email address.

    The text is stored verbatim. No syntax validation happens yet; the
    constructor may raise InvalidEmailAddressError once it does, so callers
    should treat construction as fallible.
    """

    address: str

    def __post_init__(self) -> None:
        if not isinstance(self.address, str):
            raise TypeError(
                f"EmailAddress expects str, got {type(self.address).__name__}"
            )

    @classmethod
    def parse(cls, text: str) -> EmailAddress:
        """Build an address from its textual form."""
        return cls(text)

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class Envelope:
    """
    Sender/recipient routing information for one delivery.

    Attributes:
        forward_path: Recipients, in order. Never empty.
        reverse_path: Sender, or None for a null sender.

    Raises:
        MissingToError: If forward_path is empty.
        TypeError: If an address is not an EmailAddress.
    """

    forward_path: tuple[EmailAddress, ...]
    reverse_path: EmailAddress | None = None

    def __post_init__(self) -> None:
        if isinstance(self.forward_path, str):
            raise TypeError("Envelope recipients must be EmailAddress values, not a str")
        # Recipients are stored as a tuple
        object.__setattr__(self, "forward_path", tuple(self.forward_path))
        if not self.forward_path:
            raise MissingToError()
        for address in self.forward_path:
            if not isinstance(address, EmailAddress):
                raise TypeError(
                    f"Envelope recipient must be EmailAddress, got {type(address).__name__}"
                )
        if self.reverse_path is not None and not isinstance(self.reverse_path, EmailAddress):
            raise TypeError(
                f"Envelope sender must be EmailAddress, got {type(self.reverse_path).__name__}"
            )

    @classmethod
    def new(
        cls,
        from_: EmailAddress | None,
        to: Iterable[EmailAddress],
    ) -> Envelope:
        """Create an envelope from a sender and recipients."""
        return cls(forward_path=to, reverse_path=from_)  # type: ignore[arg-type]

    @property
    def to(self) -> tuple[EmailAddress, ...]:
        """Destination addresses of the envelope."""
        return self.forward_path

    @property
    def from_(self) -> EmailAddress | None:
        """Source address of the envelope."""
        return self.reverse_path
