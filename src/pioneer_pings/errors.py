"""Error types raised while composing and dispatching pings."""


class PingError(Exception):
    """Base class for ping composition failures."""


class ValidationError(PingError, ValueError):
    """Raised before any host call when a required identifier is missing or malformed."""


class TransmissionError(PingError, RuntimeError):
    """Wraps a failure reported by the host submission primitive.

    The dispatcher records these and drops them; they never reach callers.
    """
