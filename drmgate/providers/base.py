from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from drmgate.core.models import ExceptionEntry


@runtime_checkable
class FeatureToggleProvider(Protocol):
    """
    Remote feature flags. Implementations own storage and refresh.
    """

    def is_enabled(self, feature_id: str, default: bool = False) -> bool:
        """
        Return whether the feature is on, or `default` when the flag is unknown.
        """


@runtime_checkable
class ExceptionListProvider(Protocol):
    """
    Curated list of domains granted DRM access.

    Implementations may be refreshed by a background sync; each call must return
    a consistent read-only snapshot.
    """

    def current_exceptions(self) -> Sequence[ExceptionEntry]:
        """
        Return the current snapshot of exception entries.
        """


@runtime_checkable
class UserAllowListProvider(Protocol):
    """
    Sites the user has allow-listed (protections disabled).
    """

    def contains(self, origin: str) -> bool:
        """
        Return True when the origin URL is in the user's allowlist.
        """


@runtime_checkable
class TemporaryUnprotectedProvider(Protocol):
    """
    Sites whose protections are provisionally disabled to mitigate breakage.
    """

    def contains(self, origin: str) -> bool:
        """
        Return True when the origin URL is on the temporary unprotected list.
        """
