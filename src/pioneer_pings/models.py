from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

CORE_NAMESPACE = "pioneer-core"
PING_TYPE = "pioneer-study"
SCHEMA_VERSION = 1

DemographicAnswer = Mapping[str, Any]


class PingKind(str, Enum):
    """Semantic ping kinds; the value doubles as the ingestion schema name."""

    ENROLLMENT = "pioneer-enrollment"
    DELETION_REQUEST = "deletion-request"
    DEMOGRAPHIC_SURVEY = "demographic-survey"


@dataclass(frozen=True, slots=True)
class JsonWebKey:
    """Public half of an EC JSON Web Key (RFC 7517)."""

    crv: str
    kty: str
    x: str
    y: str
    kid: str | None = None

    def to_dict(self) -> dict[str, str]:
        payload = {"crv": self.crv, "kty": self.kty, "x": self.x, "y": self.y}
        if self.kid is not None:
            payload["kid"] = self.kid
        return payload


@dataclass(frozen=True, slots=True)
class EncryptionKey:
    key_id: str
    public_key: JsonWebKey


@dataclass(slots=True)
class PingOptions:
    """Routing and schema envelope handed to the host next to the payload."""

    study_name: str
    override_participant_id: str
    encryption_key_id: str
    public_key: JsonWebKey
    schema_name: str
    schema_namespace: str
    add_participant_id: bool = True
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "studyName": self.study_name,
            "addParticipantId": self.add_participant_id,
            "overrideParticipantId": self.override_participant_id,
            "encryptionKeyId": self.encryption_key_id,
            "publicKey": self.public_key.to_dict(),
            "schemaName": self.schema_name,
            "schemaNamespace": self.schema_namespace,
            "schemaVersion": self.schema_version,
        }
