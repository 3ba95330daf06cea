"""
Command-line entry point for the static host.

    python -m spahost                          # serve ./dist on 127.0.0.1:3000
    python -m spahost --root build --port 8080
    spahost --fallback build/app.html

Flags override the matching environment variables (HOST, PORT, ASSET_ROOT,
FALLBACK_FILE, LOG_LEVEL), which in turn override values from ``.env``.
"""

import argparse
import logging
import sys

from spahost.config import load_settings
from spahost.main import create_app, serve

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spahost",
        description="Serve a directory of static files, falling back to index.html.",
    )
    parser.add_argument("--host", default=None, help="Address to bind (default 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind (default 3000)")
    parser.add_argument("--root", default=None, help="Asset directory (default dist)")
    parser.add_argument("--fallback", default=None, help="Fallback file (default <root>/index.html)")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["critical", "error", "warning", "info", "debug"],
        help="Logging level (default info)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    settings = load_settings(
        HOST=args.host,
        PORT=args.port,
        ASSET_ROOT=args.root,
        FALLBACK_FILE=args.fallback,
        LOG_LEVEL=args.log_level,
    )

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(settings)
    except RuntimeError as e:
        logger.error(f"Can't serve {settings.ASSET_ROOT}: {e}")
        sys.exit(1)

    serve(app, settings)


if __name__ == "__main__":
    main()
