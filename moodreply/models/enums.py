"""
Enums for type-safe values across the application.
"""
from enum import Enum


class Mood(str, Enum):
    """Tone selected by the user for reply suggestions."""
    GOOD = "good"
    ANGRY = "angry"
    SARCASTIC = "sarcastic"
    ROMCOM = "romcom"
    COOL = "cool"
    RIZZ = "rizz"
    FORMAL = "formal"
    RELATIONSHIP = "relationship"


class AttemptKind(str, Enum):
    """Classified outcome of a single request against one provider target."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED = "malformed"


class FallbackState(str, Enum):
    """States of the provider fallback loop."""
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"
    FAILED = "failed"
