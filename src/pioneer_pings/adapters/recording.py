"""In-memory host client for dry runs and tests."""

from __future__ import annotations

import copy
from typing import Any
from uuid import uuid4

from pioneer_pings.adapters.host import SubmissionClient, SubmittedPing


class RecordingSubmissionClient(SubmissionClient):
    """Captures submitted pings instead of transmitting them."""

    def __init__(self) -> None:
        self._submitted: list[SubmittedPing] = []

    @property
    def submitted(self) -> list[SubmittedPing]:
        return list(self._submitted)

    async def submit_encrypted_ping(self, ping_type: str, payload: dict[str, Any], options: dict[str, Any]) -> None:
        self._submitted.append(
            SubmittedPing(ping_type=ping_type, payload=copy.deepcopy(payload), options=copy.deepcopy(options))
        )

    async def generate_uuid(self) -> str:
        return str(uuid4())
