"""Boundary for the host capability that seals and transmits pings."""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(slots=True)
class SubmittedPing:
    """A ping exactly as it was handed to the host."""

    ping_type: str
    payload: dict[str, Any]
    options: dict[str, Any]


class SubmissionClient(Protocol):
    """Interface to the privileged host API that encrypts and submits pings."""

    async def submit_encrypted_ping(self, ping_type: str, payload: dict[str, Any], options: dict[str, Any]) -> None:
        """Encrypt ``payload`` with ``options["publicKey"]`` and submit it.

        Any exception raised here is treated as a transmission failure.
        """

    async def generate_uuid(self) -> str:
        """Return a fresh UUID string from the host."""
