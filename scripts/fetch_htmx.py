#!/usr/bin/env python3
"""Fetch the pinned htmx build into the package before building.

The bundle is package data (src/htmxkit/assets/htmx.min.js) and is not
generated from source, so it has to be downloaded once per version bump.

Usage:
    python scripts/fetch_htmx.py            # Download the pinned version
    python scripts/fetch_htmx.py --verify   # Check the bundled file only
    python scripts/fetch_htmx.py --version 2.0.4 --force
"""

from __future__ import annotations

import argparse
import hashlib
import sys
from pathlib import Path

import httpx

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

from htmxkit.assets.provider import HTMX_RESOURCE, HTMX_VERSION, check_payload  # noqa: E402

TARGET = ROOT / "src" / "htmxkit" / "assets" / HTMX_RESOURCE
URL_TEMPLATE = "https://unpkg.com/htmx.org@{version}/dist/htmx.min.js"


def verify() -> int:
    if not TARGET.exists():
        print(f"ERROR: {TARGET} is missing; run without --verify to fetch it", file=sys.stderr)
        return 1
    data = TARGET.read_bytes()
    problems = check_payload(data)
    for problem in problems:
        print(f"ERROR: {TARGET.name} {problem}", file=sys.stderr)
    if not problems:
        digest = hashlib.sha256(data).hexdigest()
        print(f"✓ {TARGET.name}: {len(data)} bytes, sha256 {digest}")
    return 1 if problems else 0


def fetch(version: str, force: bool) -> int:
    if TARGET.exists() and not force:
        print(f"{TARGET.name} already present; use --force to replace it")
        return verify()

    url = URL_TEMPLATE.format(version=version)
    print(f"Fetching {url}")
    try:
        response = httpx.get(url, follow_redirects=True, timeout=30.0)
        response.raise_for_status()
    except httpx.HTTPError as e:
        print(f"ERROR: download failed: {e}", file=sys.stderr)
        return 1

    problems = check_payload(response.content)
    if problems:
        for problem in problems:
            print(f"ERROR: downloaded file {problem}", file=sys.stderr)
        return 1

    TARGET.write_bytes(response.content)
    if version != HTMX_VERSION:
        print(f"WARNING: fetched {version} but HTMX_VERSION is {HTMX_VERSION}; update provider.py")
    return verify()


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch the bundled htmx build")
    parser.add_argument("--version", default=HTMX_VERSION, help=f"htmx version (default: {HTMX_VERSION})")
    parser.add_argument("--force", action="store_true", help="Replace an existing bundle")
    parser.add_argument("--verify", action="store_true", help="Only check the bundled file")
    args = parser.parse_args()

    if args.verify:
        return verify()
    return fetch(args.version, args.force)


if __name__ == "__main__":
    sys.exit(main())
