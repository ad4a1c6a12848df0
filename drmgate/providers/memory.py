"""
In-memory provider implementations.

Each provider holds an immutable snapshot (tuple / frozenset / dict copy) and swaps it
under a lock on writes. Readers take the current reference, so a background sync can
replace a list while decisions are being evaluated on other threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from drmgate.core.domains import host_of, url_matches_domain
from drmgate.core.models import ExceptionEntry

logger = logging.getLogger(__name__)


class StaticFeatureToggle:
    """Feature flags held in a dict (e.g. materialized from remote privacy config)."""

    def __init__(self, flags: Optional[Mapping[str, bool]] = None):
        self._lock = threading.Lock()
        self._flags: Dict[str, bool] = dict(flags or {})

    def is_enabled(self, feature_id: str, default: bool = False) -> bool:
        # `set` swaps the whole dict, so an unlocked read sees one snapshot.
        flags = self._flags
        if feature_id not in flags:
            return default
        return bool(flags[feature_id])

    def set(self, feature_id: str, enabled: bool) -> None:
        with self._lock:
            flags = dict(self._flags)
            flags[feature_id] = bool(enabled)
            self._flags = flags
        logger.info("Feature %s set to %s", feature_id, "enabled" if enabled else "disabled")


class InMemoryExceptionList:
    """Curated DRM exception list; `replace()` is what a sync job would call."""

    def __init__(self, entries: Iterable[ExceptionEntry] = ()):
        self._lock = threading.Lock()
        self._entries: Tuple[ExceptionEntry, ...] = tuple(entries)

    def current_exceptions(self) -> Tuple[ExceptionEntry, ...]:
        return self._entries

    def replace(self, entries: Iterable[ExceptionEntry]) -> None:
        snapshot = tuple(entries)
        with self._lock:
            self._entries = snapshot
        logger.info("DRM exception list replaced (%d entries)", len(snapshot))


class InMemoryUserAllowList:
    """
    User allowlist keyed by exact host.

    Allow-listing `example.com` does not cover `www.example.com`; the user toggles
    protections per site, and a site is its host.
    """

    def __init__(self, domains: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._domains: FrozenSet[str] = frozenset(d for d in domains if d)

    def contains(self, origin: str) -> bool:
        host = host_of(origin)
        if host is None:
            return False
        return host in self._domains

    def add(self, domain: str) -> None:
        with self._lock:
            self._domains = self._domains | {domain}
        logger.info("Added %s to user allowlist", domain)

    def remove(self, domain: str) -> None:
        with self._lock:
            self._domains = self._domains - {domain}
        logger.info("Removed %s from user allowlist", domain)

    def replace(self, domains: Iterable[str]) -> None:
        snapshot = frozenset(d for d in domains if d)
        with self._lock:
            self._domains = snapshot
        logger.info("User allowlist replaced (%d domains)", len(snapshot))


class InMemoryUnprotectedTemporary:
    """Temporary unprotected sites; an entry also covers its subdomains."""

    def __init__(self, entries: Iterable[ExceptionEntry] = ()):
        self._lock = threading.Lock()
        self._entries: Tuple[ExceptionEntry, ...] = tuple(entries)

    def contains(self, origin: str) -> bool:
        return any(url_matches_domain(origin, e.domain) for e in self._entries)

    def replace(self, entries: Iterable[ExceptionEntry]) -> None:
        snapshot = tuple(entries)
        with self._lock:
            self._entries = snapshot
        logger.info("Temporary unprotected list replaced (%d entries)", len(snapshot))
