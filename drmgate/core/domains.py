"""
Host extraction and exact-or-subdomain matching.

Matching is case-sensitive and requires a dot boundary, so `evilopen.spotify.com`
does not match `open.spotify.com` while `www.open.spotify.com` does.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit

# `host`, `host:port` or `host/path` without a scheme.
_BARE_HOST_RE = re.compile(r"[^/:?#@\s]+(:\d*)?([/?#].*)?")
_HOSTNAME_RE = re.compile(r"[A-Za-z0-9.-]+")
_IPV6_RE = re.compile(r"[0-9A-Fa-f:.]+")


def host_of(url: object) -> Optional[str]:
    """
    Return the host component of an origin URL, or None when there isn't one.

    Case is preserved. Userinfo, port and IPv6 brackets are stripped. A bare host
    (no scheme) is accepted; opaque URLs like `about:blank` or `data:...` have no host.
    """
    if not isinstance(url, str):
        return None
    # Browsers read `\` as `/` in hierarchical URLs, so `a.com\@b.com` is host `a.com`.
    raw = url.strip().replace("\\", "/")
    if not raw:
        return None
    if "://" not in raw and not raw.startswith("//"):
        if not _BARE_HOST_RE.fullmatch(raw):
            return None
        raw = "//" + raw
    try:
        netloc = urlsplit(raw).netloc
    except ValueError:
        return None

    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        host = host[1:end] if end > 0 else ""
        return host if _IPV6_RE.fullmatch(host) else None
    host = host.partition(":")[0]
    if not _HOSTNAME_RE.fullmatch(host):
        return None
    return host


def same_or_subdomain(host: Optional[str], domain: Optional[str]) -> bool:
    if not host or not domain:
        return False
    if host == domain:
        return True
    return host.endswith("." + domain)


def url_matches_domain(url: object, domain: Optional[str]) -> bool:
    return same_or_subdomain(host_of(url), domain)
