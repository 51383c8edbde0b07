"""Namespace to encryption key routing.

Pings for the program-wide ``pioneer-core`` namespace are sealed with the core
key. Every other namespace is a study namespace and gets the discard key, a
public, non-secret key that only exists because the ingestion pipeline needs
*some* key to route the ping to the study environment.

Note: the discard key is used for any non-core namespace regardless of payload.
Today only empty payloads go to study namespaces. A future ping kind that sends
real content to a study namespace would be sealed with a key that protects
nothing, so such a kind needs its own key before it ships.
"""

from __future__ import annotations

from .models import CORE_NAMESPACE, EncryptionKey, JsonWebKey

CORE_KEY = EncryptionKey(
    key_id="core",
    public_key=JsonWebKey(
        crv="P-256",
        kty="EC",
        x="muvXFcGjbk2uZCCa8ycoH8hVxeDCGPQ9Ed2-QHlTtuc",
        y="xrLUev8_yUrSFAlabnHInvU4JKc6Ew3YXaaoDloQxw8",
        kid="core",
    ),
)

DISCARD_KEY = EncryptionKey(
    key_id="discarded",
    public_key=JsonWebKey(
        crv="P-256",
        kty="EC",
        x="XLkI3NaY3-AF2nRMspC63BT1u0Y3moXYSfss7VuQ0mk",
        y="SB0KnIW-pqk85OIEYZenoNkEyOOp5GeWQhS1KeRtEUE",
    ),
)


class KeySelector:
    """Maps a routing namespace to the key its pings are sealed with."""

    def __init__(self, core_key: EncryptionKey = CORE_KEY, discard_key: EncryptionKey = DISCARD_KEY) -> None:
        self._core_key = core_key
        self._discard_key = discard_key

    def select_key(self, namespace: str) -> EncryptionKey:
        if namespace == CORE_NAMESPACE:
            return self._core_key
        return self._discard_key
