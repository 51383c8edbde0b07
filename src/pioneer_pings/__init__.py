"""Composition and routing of encrypted research-panel telemetry pings."""

from .dispatcher import PingDispatch, PingDispatcher, PingDispatchStatus
from .errors import PingError, TransmissionError, ValidationError
from .keys import CORE_KEY, DISCARD_KEY, KeySelector
from .models import CORE_NAMESPACE, EncryptionKey, JsonWebKey, PingKind, PingOptions
from .payloads import PayloadShaper

__all__ = [
    "CORE_KEY",
    "CORE_NAMESPACE",
    "DISCARD_KEY",
    "EncryptionKey",
    "JsonWebKey",
    "KeySelector",
    "PayloadShaper",
    "PingDispatch",
    "PingDispatchStatus",
    "PingDispatcher",
    "PingError",
    "PingKind",
    "PingOptions",
    "TransmissionError",
    "ValidationError",
]
