"""Asynchronous ping dispatcher that validates, routes and submits pings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pioneer_pings.adapters.host import SubmissionClient
from pioneer_pings.diagnostics import DiagnosticSink, LoggingDiagnosticSink
from pioneer_pings.errors import TransmissionError, ValidationError
from pioneer_pings.keys import KeySelector
from pioneer_pings.models import (
    CORE_NAMESPACE,
    PING_TYPE,
    DemographicAnswer,
    JsonWebKey,
    PingKind,
    PingOptions,
)
from pioneer_pings.payloads import PayloadShaper


class PingDispatchStatus(str, Enum):
    """Outcome of handing a ping to the host."""

    SUBMITTED = "submitted"
    FAILED = "failed"


@dataclass(slots=True)
class PingDispatch:
    """What was handed to the host for a single send call."""

    ping_type: str
    options: dict[str, Any]
    payload: dict[str, Any]
    status: PingDispatchStatus
    error: str | None = None


class PingDispatcher:
    """Builds pings for each kind and submits them through the host client.

    Validation failures raise :class:`ValidationError` before the host is
    touched. Once a ping is built, delivery is best effort: host failures are
    reported to the diagnostic sink and dropped, never retried or re-raised.
    """

    def __init__(
        self,
        client: SubmissionClient,
        *,
        key_selector: KeySelector | None = None,
        payload_shaper: PayloadShaper | None = None,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        self._client = client
        self._key_selector = key_selector or KeySelector()
        self._payload_shaper = payload_shaper or PayloadShaper()
        self._diagnostics = diagnostics or LoggingDiagnosticSink()

    async def send_enrollment_ping(self, participant_id: str, study_id: str | None = None) -> PingDispatch:
        """Report enrollment in the program, or in ``study_id`` when given."""
        namespace = CORE_NAMESPACE if study_id is None else study_id
        return await self._send_empty_ping(participant_id, PingKind.ENROLLMENT, namespace)

    async def send_deletion_ping(self, participant_id: str, study_id: str | None = None) -> PingDispatch:
        """Request deletion of the participant's data for ``study_id``."""
        if study_id is None:
            raise ValidationError("the deletion-request ping requires a study id")
        return await self._send_empty_ping(participant_id, PingKind.DELETION_REQUEST, study_id)

    async def send_demographic_survey_ping(self, participant_id: str, answers: DemographicAnswer) -> PingDispatch:
        """Report demographic survey answers; always routed to the core namespace."""
        self._validate_participant_id(participant_id)
        payload = self._payload_shaper.shape(PingKind.DEMOGRAPHIC_SURVEY, answers)
        key = self._key_selector.select_key(CORE_NAMESPACE)
        return await self.send_ping(
            participant_id,
            PingKind.DEMOGRAPHIC_SURVEY.value,
            payload,
            CORE_NAMESPACE,
            key.key_id,
            key.public_key,
        )

    async def send_ping(
        self,
        participant_id: str,
        kind_label: str,
        payload: dict[str, Any],
        namespace: str,
        key_id: str,
        key: JsonWebKey,
    ) -> PingDispatch:
        """Submit ``payload`` under schema ``kind_label`` in ``namespace``."""
        self._validate_participant_id(participant_id)

        options = PingOptions(
            study_name=namespace,
            override_participant_id=participant_id,
            encryption_key_id=key_id,
            public_key=key,
            schema_name=kind_label,
            schema_namespace=namespace,
        ).to_dict()

        try:
            await self._client.submit_encrypted_ping(PING_TYPE, payload, options)
        except Exception as exc:  # noqa: BLE001 - host failures are logged and dropped.
            error = TransmissionError(f"{type(exc).__name__}: {exc}")
            self._diagnostics.emit("ping_submission_failed", {"error": str(error), "options": options})
            return PingDispatch(
                ping_type=PING_TYPE,
                options=options,
                payload=payload,
                status=PingDispatchStatus.FAILED,
                error=str(error),
            )

        self._diagnostics.emit("ping_submitted", {"options": options, "payload": payload})
        return PingDispatch(
            ping_type=PING_TYPE,
            options=options,
            payload=payload,
            status=PingDispatchStatus.SUBMITTED,
        )

    async def _send_empty_ping(self, participant_id: str, kind: PingKind, namespace: str) -> PingDispatch:
        self._validate_participant_id(participant_id)
        key = self._key_selector.select_key(namespace)
        return await self.send_ping(
            participant_id,
            kind.value,
            self._payload_shaper.shape(kind),
            namespace,
            key.key_id,
            key.public_key,
        )

    @staticmethod
    def _validate_participant_id(participant_id: object) -> None:
        if not isinstance(participant_id, str) or not participant_id:
            raise ValidationError(f"invalid participant id {participant_id!r}")
