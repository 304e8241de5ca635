"""Run the demo server.

Usage:
    htmxkit-demo [--host HOST] [--port PORT] [--log-level LEVEL]
    python -m htmxkit.demo

Flags override the HTMXKIT_HOST / HTMXKIT_PORT / HTMXKIT_LOG_LEVEL
environment variables.
"""

from __future__ import annotations

import argparse
import logging
import sys

from htmxkit.demo.config import DemoConfig
from htmxkit.exceptions import HtmxKitError

logger = logging.getLogger("htmxkit.demo")


def build_parser(defaults: DemoConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmxkit-demo",
        description="Serve the htmxkit + htmx demo application.",
    )
    parser.add_argument("--host", default=defaults.host, help=f"bind address (default: {defaults.host})")
    parser.add_argument("--port", type=int, default=defaults.port, help=f"port (default: {defaults.port})")
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        help=f"logging level (default: {defaults.log_level})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, build the app and run it under uvicorn."""
    try:
        defaults = DemoConfig.from_env()
        args = build_parser(defaults).parse_args(argv)
        config = DemoConfig(host=args.host, port=args.port, log_level=args.log_level)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    import uvicorn

    from htmxkit.demo.app import create_app

    try:
        app = create_app(config=config)
    except HtmxKitError as e:
        print(e.format_compact(), file=sys.stderr)
        return 1

    logger.info("htmxkit demo server starting on %s", config.url)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
