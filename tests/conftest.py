"""
Pytest config.

Local imports like `import drmgate` rely on the repo root being on sys.path; pin that here
so a global `pytest` entrypoint can always import the local package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_syspath() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_root_on_syspath()


@pytest.fixture(autouse=True)
def _fresh_drm_config(monkeypatch: pytest.MonkeyPatch):
    """
    `load_drm_config()` is cached; clear it around each test and drop any DRM_* vars
    inherited from the developer's shell.
    """
    from drmgate.config import load_drm_config

    for name in ("DRM_FEATURE_ENABLED", "DRM_EXCEPTIONS", "DRM_USER_ALLOWLIST", "DRM_UNPROTECTED_TEMPORARY"):
        monkeypatch.delenv(name, raising=False)
    load_drm_config.cache_clear()
    yield
    load_drm_config.cache_clear()
