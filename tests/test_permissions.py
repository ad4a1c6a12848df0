from __future__ import annotations

from drmgate.core.models import Capability, ExceptionEntry
from drmgate.decider import PermissionDecider
from drmgate.permissions import (
    RESOURCE_AUDIO_CAPTURE,
    RESOURCE_MIDI_SYSEX,
    RESOURCE_PROTECTED_MEDIA_ID,
    RESOURCE_VIDEO_CAPTURE,
    DrmPermissions,
    to_capabilities,
)
from drmgate.providers.memory import (
    InMemoryExceptionList,
    InMemoryUnprotectedTemporary,
    InMemoryUserAllowList,
    StaticFeatureToggle,
)


def _perms(*, enabled: bool = True, user_allow=(), unprotected=()) -> DrmPermissions:
    decider = PermissionDecider(
        StaticFeatureToggle({"eme": enabled}),
        InMemoryExceptionList([ExceptionEntry(domain="open.spotify.com", reason="my reason here")]),
        InMemoryUserAllowList(user_allow),
        InMemoryUnprotectedTemporary([ExceptionEntry(domain=d) for d in unprotected]),
    )
    return DrmPermissions(decider)


def test_to_capabilities_drops_unknown_identifiers() -> None:
    caps = to_capabilities([RESOURCE_PROTECTED_MEDIA_ID, "android.webkit.resource.UNKNOWN", None, RESOURCE_MIDI_SYSEX])
    assert caps == {Capability.PROTECTED_MEDIA_ID, Capability.MIDI_SYSEX}


def test_protected_media_request_is_granted() -> None:
    out = _perms().get_drm_permissions_for_request("https://open.spotify.com", [RESOURCE_PROTECTED_MEDIA_ID])
    assert out == [RESOURCE_PROTECTED_MEDIA_ID]


def test_other_resources_are_never_granted() -> None:
    out = _perms().get_drm_permissions_for_request(
        "https://open.spotify.com", [RESOURCE_MIDI_SYSEX, RESOURCE_VIDEO_CAPTURE, RESOURCE_AUDIO_CAPTURE]
    )
    assert out == []


def test_mixed_request_keeps_only_protected_media_once() -> None:
    out = _perms().get_drm_permissions_for_request(
        "https://open.spotify.com",
        [RESOURCE_AUDIO_CAPTURE, RESOURCE_PROTECTED_MEDIA_ID, RESOURCE_PROTECTED_MEDIA_ID],
    )
    assert out == [RESOURCE_PROTECTED_MEDIA_ID]


def test_denials_return_empty_list() -> None:
    req = [RESOURCE_PROTECTED_MEDIA_ID]
    assert _perms(enabled=False).get_drm_permissions_for_request("https://open.spotify.com", req) == []
    assert _perms().get_drm_permissions_for_request("https://test.com", req) == []
    allow_listed = _perms(user_allow=["open.spotify.com"])
    assert allow_listed.get_drm_permissions_for_request("https://open.spotify.com", req) == []
    assert _perms(unprotected=["spotify.com"]).get_drm_permissions_for_request("https://open.spotify.com", req) == []


def test_empty_and_malformed_inputs() -> None:
    p = _perms()
    assert p.get_drm_permissions_for_request("https://open.spotify.com", []) == []
    assert p.get_drm_permissions_for_request("", [RESOURCE_PROTECTED_MEDIA_ID]) == []
