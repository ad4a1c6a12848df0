"""
DRM permission decision.

Order matters and is part of the observable behaviour:
1. feature flag
2. only protected-media access is grantable
3. user allowlist (allow-listing a site disables special-cased protections, DRM grants included)
4. temporary unprotected list
5. curated exception list (exact host or dot-subdomain)

Every step fails closed. `evaluate` never raises, never logs and never mutates a provider.
"""

from __future__ import annotations

from typing import Iterable, Set

from drmgate.core.domains import host_of, same_or_subdomain
from drmgate.core.models import DRM_FEATURE_ID, GRANTABLE, Capability
from drmgate.providers.base import (
    ExceptionListProvider,
    FeatureToggleProvider,
    TemporaryUnprotectedProvider,
    UserAllowListProvider,
)


class PermissionDecider:
    def __init__(
        self,
        feature_toggle: FeatureToggleProvider,
        exceptions: ExceptionListProvider,
        user_allow_list: UserAllowListProvider,
        unprotected_temporary: TemporaryUnprotectedProvider,
    ):
        self._feature_toggle = feature_toggle
        self._exceptions = exceptions
        self._user_allow_list = user_allow_list
        self._unprotected_temporary = unprotected_temporary

    def evaluate(self, origin: str, requested: Iterable[Capability]) -> Set[Capability]:
        """Return the subset of `requested` to grant to `origin` (possibly empty)."""
        try:
            if not self._feature_toggle.is_enabled(DRM_FEATURE_ID, False):
                return set()
            wanted = {c for c in (requested or ()) if isinstance(c, Capability) and c in GRANTABLE}
            if not wanted:
                return set()
            if not self.is_drm_allowed_for_url(origin):
                return set()
            return wanted
        except Exception:
            return set()

    def is_drm_allowed_for_url(self, origin: str) -> bool:
        """Origin-level verdict (allowlist, unprotected list, exceptions), ignoring the feature flag."""
        try:
            if self._user_allow_list.contains(origin):
                return False
            if self._unprotected_temporary.contains(origin):
                return False
            host = host_of(origin)
            if host is None:
                return False
            for entry in self._exceptions.current_exceptions():
                if same_or_subdomain(host, entry.domain):
                    return True
            return False
        except Exception:
            return False
