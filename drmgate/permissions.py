"""
Boundary between the browser's permission identifiers and `Capability`.

The host hands us the raw resource strings from a WebView permission request and gets
back the ones to grant. Nothing past this module sees platform vocabulary.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Set

from drmgate.core.models import Capability
from drmgate.decider import PermissionDecider

# android.webkit.PermissionRequest.RESOURCE_* values
RESOURCE_PROTECTED_MEDIA_ID = "android.webkit.resource.PROTECTED_MEDIA_ID"
RESOURCE_AUDIO_CAPTURE = "android.webkit.resource.AUDIO_CAPTURE"
RESOURCE_VIDEO_CAPTURE = "android.webkit.resource.VIDEO_CAPTURE"
RESOURCE_MIDI_SYSEX = "android.webkit.resource.MIDI_SYSEX"

_TO_CAPABILITY: Dict[str, Capability] = {
    RESOURCE_PROTECTED_MEDIA_ID: Capability.PROTECTED_MEDIA_ID,
    RESOURCE_AUDIO_CAPTURE: Capability.AUDIO_CAPTURE,
    RESOURCE_VIDEO_CAPTURE: Capability.VIDEO_CAPTURE,
    RESOURCE_MIDI_SYSEX: Capability.MIDI_SYSEX,
}


def to_capability(resource: object) -> Capability | None:
    if not isinstance(resource, str):
        return None
    return _TO_CAPABILITY.get(resource)


def to_capabilities(resources: Iterable[object]) -> Set[Capability]:
    """Map platform identifiers to capabilities; unknown identifiers are dropped."""
    out: Set[Capability] = set()
    for r in resources or ():
        cap = to_capability(r)
        if cap is not None:
            out.add(cap)
    return out


class DrmPermissions:
    """Host-facing entry point taking and returning platform identifiers."""

    def __init__(self, decider: PermissionDecider):
        self._decider = decider

    def get_drm_permissions_for_request(self, url: str, resources: Iterable[object]) -> List[str]:
        """
        Return the subset of `resources` to grant, in the caller's order, without duplicates.

        Example:
            >>> perms.get_drm_permissions_for_request(
            ...     "https://open.spotify.com", [RESOURCE_PROTECTED_MEDIA_ID, RESOURCE_AUDIO_CAPTURE]
            ... )
            ["android.webkit.resource.PROTECTED_MEDIA_ID"]
        """
        requested = list(resources or ())
        granted = self._decider.evaluate(url, to_capabilities(requested))
        if not granted:
            return []

        out: List[str] = []
        for r in requested:
            if to_capability(r) in granted and r not in out:
                out.append(r)
        return out
