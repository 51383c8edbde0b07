"""CLI-side handler wrapping the async ping dispatcher."""

from __future__ import annotations

import asyncio
from typing import Any

from pioneer_pings.dispatcher import PingDispatch, PingDispatcher


class CliPingHandler:
    """Simple sync-friendly facade over the async ping dispatcher."""

    def __init__(self, dispatcher: PingDispatcher) -> None:
        self._dispatcher = dispatcher

    def enroll(self, participant_id: str, study_id: str | None = None) -> PingDispatch:
        return asyncio.run(self._dispatcher.send_enrollment_ping(participant_id, study_id))

    def unenroll(self, participant_id: str, study_id: str | None) -> PingDispatch:
        return asyncio.run(self._dispatcher.send_deletion_ping(participant_id, study_id))

    def submit_demographics(self, participant_id: str, answers: dict[str, Any]) -> PingDispatch:
        return asyncio.run(self._dispatcher.send_demographic_survey_ping(participant_id, answers))
