"""
DRM gating configuration (env/ConfigMap driven).

Recommended vars:
- DRM_FEATURE_ENABLED=1
- DRM_EXCEPTIONS=open.spotify.com=licensed,netflix.com
- DRM_USER_ALLOWLIST=example.com
- DRM_UNPROTECTED_TEMPORARY=broken-site.com=breakage
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional, Tuple

from pydantic import ValidationError

from drmgate.core.models import DRM_FEATURE_ID, ExceptionEntry
from drmgate.decider import PermissionDecider
from drmgate.providers.memory import (
    InMemoryExceptionList,
    InMemoryUnprotectedTemporary,
    InMemoryUserAllowList,
    StaticFeatureToggle,
)

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "y", "on"):
        return True
    if raw in ("0", "false", "no", "n", "off"):
        return False
    logger.warning("Ignoring unrecognized boolean %s=%r, using default %s", name, raw, default)
    return default


def _split_csv(raw: str) -> List[str]:
    return [x.strip() for x in (raw or "").split(",") if x.strip()]


def _parse_entries(name: str) -> Tuple[ExceptionEntry, ...]:
    """Parse `domain` / `domain=reason` items; malformed items are skipped."""
    out: List[ExceptionEntry] = []
    for item in _split_csv(os.getenv(name, "")):
        domain, _, reason = item.partition("=")
        try:
            out.append(ExceptionEntry(domain=domain.strip(), reason=reason.strip()))
        except ValidationError:
            logger.warning("Skipping malformed %s item: %r", name, item)
    return tuple(out)


@dataclass(frozen=True)
class DrmConfig:
    feature_enabled: bool = False
    exceptions: Tuple[ExceptionEntry, ...] = field(default_factory=tuple)
    user_allowlist: Tuple[str, ...] = field(default_factory=tuple)
    unprotected_temporary: Tuple[ExceptionEntry, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict:
        return {
            "feature_enabled": self.feature_enabled,
            "exceptions": [e.model_dump() for e in self.exceptions],
            "user_allowlist": list(self.user_allowlist),
            "unprotected_temporary": [e.model_dump() for e in self.unprotected_temporary],
        }


@lru_cache(maxsize=1)
def load_drm_config() -> DrmConfig:
    """
    Load DRM gating configuration from environment variables.

    The feature is off unless DRM_FEATURE_ENABLED is set, so a missing flag never grants.
    """
    return DrmConfig(
        feature_enabled=_env_bool("DRM_FEATURE_ENABLED", False),
        exceptions=_parse_entries("DRM_EXCEPTIONS"),
        user_allowlist=tuple(_split_csv(os.getenv("DRM_USER_ALLOWLIST", ""))),
        unprotected_temporary=_parse_entries("DRM_UNPROTECTED_TEMPORARY"),
    )


def build_decider(config: Optional[DrmConfig] = None) -> PermissionDecider:
    """Wire in-memory providers from config (env by default) into a decider."""
    cfg = config if config is not None else load_drm_config()
    return PermissionDecider(
        feature_toggle=StaticFeatureToggle({DRM_FEATURE_ID: cfg.feature_enabled}),
        exceptions=InMemoryExceptionList(cfg.exceptions),
        user_allow_list=InMemoryUserAllowList(cfg.user_allowlist),
        unprotected_temporary=InMemoryUnprotectedTemporary(cfg.unprotected_temporary),
    )
