"""Host submission adapters."""

from .host import SubmissionClient, SubmittedPing
from .recording import RecordingSubmissionClient

__all__ = [
    "RecordingSubmissionClient",
    "SubmissionClient",
    "SubmittedPing",
]
