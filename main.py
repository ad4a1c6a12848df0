#!/usr/bin/env python3
"""
DRM permission gating - developer harness.
Evaluates a single permission request against env configuration and prints the decision.
"""

import argparse
import json
import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", stream=sys.stderr
)


def decide(url: str, permissions: list) -> dict:
    """Evaluate one request with the env-configured providers."""
    from drmgate.config import build_decider
    from drmgate.permissions import DrmPermissions

    decider = build_decider()
    granted = DrmPermissions(decider).get_drm_permissions_for_request(url, permissions)
    return {
        "url": url,
        "requested": list(permissions),
        "granted": granted,
        "allowed_for_url": decider.is_drm_allowed_for_url(url),
    }


def main(argv=None):
    """CLI entry point."""
    from drmgate.permissions import RESOURCE_PROTECTED_MEDIA_ID

    parser = argparse.ArgumentParser(
        description="Evaluate DRM (protected media) permission requests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Protected media request against the env-configured exception list
  DRM_FEATURE_ENABLED=1 DRM_EXCEPTIONS=open.spotify.com python main.py --url https://open.spotify.com

  # Several permissions at once
  python main.py --url https://test.com \\
      --permission android.webkit.resource.PROTECTED_MEDIA_ID \\
      --permission android.webkit.resource.AUDIO_CAPTURE

  # Show the resolved configuration
  python main.py --show-config
        """,
    )
    parser.add_argument("--url", help="Origin URL of the requesting page")
    parser.add_argument(
        "--permission",
        action="append",
        metavar="RESOURCE",
        help=f"Platform permission identifier; repeatable (default: {RESOURCE_PROTECTED_MEDIA_ID})",
    )
    parser.add_argument("--show-config", action="store_true", help="Print the resolved DRM configuration")

    args = parser.parse_args(argv)

    try:
        if args.show_config:
            from drmgate.config import load_drm_config

            print(json.dumps(load_drm_config().as_dict(), indent=2))
            return

        if args.url:
            permissions = args.permission or [RESOURCE_PROTECTED_MEDIA_ID]
            print(json.dumps(decide(args.url, permissions), indent=2))
            return

        parser.print_help()

    except Exception as e:
        print(f"Error evaluating DRM request: {e}", file=sys.stderr)
        raise


if __name__ == "__main__":
    main()
