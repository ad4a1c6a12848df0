"""Domain models shared by the decider, providers and platform boundary."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

# Remote config feature name for Encrypted Media Extensions gating.
DRM_FEATURE_ID = "eme"


class Capability(str, Enum):
    PROTECTED_MEDIA_ID = "protected_media_id"
    AUDIO_CAPTURE = "audio_capture"
    VIDEO_CAPTURE = "video_capture"
    MIDI_SYSEX = "midi_sysex"


# The only capability this engine can ever grant.
GRANTABLE = frozenset({Capability.PROTECTED_MEDIA_ID})


class ExceptionEntry(BaseModel):
    """A domain granted DRM access by the curated list. `reason` is informational only."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    domain: str
    reason: str = ""

    @field_validator("domain")
    @classmethod
    def _domain_is_a_host(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("domain must not be empty")
        if any(c.isspace() for c in v) or "/" in v:
            raise ValueError(f"domain must be a bare host: {v!r}")
        return v
