"""DRM permission gating (protected media identifier).

Decides which of a page's requested capabilities may be granted, given the
remote feature flag, the curated exception list, the user allowlist and the
temporary unprotected list.
"""

from drmgate.core.models import DRM_FEATURE_ID, Capability, ExceptionEntry
from drmgate.decider import PermissionDecider

__all__ = ["Capability", "DRM_FEATURE_ID", "ExceptionEntry", "PermissionDecider"]
