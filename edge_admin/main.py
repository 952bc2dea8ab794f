"""
Command-line entry point: `edge-admin` (or `python -m edge_admin.main`).

Starts uvicorn serving edge_admin.api.asgi:app. Host and port default to
SERVER_HOST / SERVER_PORT from settings and may be overridden by flags.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import uvicorn

from edge_admin.config.settings import Settings
from edge_admin.utils import configure_logging

logger = logging.getLogger(__name__)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edge-admin",
        description="DNS record proxy and operator dashboard for the edge provider",
    )
    parser.add_argument("--host", default=settings.server_host, help="bind host")
    parser.add_argument("--port", type=int, default=settings.server_port, help="bind port")
    parser.add_argument("--reload", action="store_true", help="auto-reload on code changes")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    settings = Settings()
    args = _build_parser(settings).parse_args(argv)

    configure_logging(level=settings.log_level, json_logs=settings.log_format == "json")
    logger.info(f"Starting edge-admin on {args.host}:{args.port} ({settings.environment})")

    uvicorn.run(
        "edge_admin.api.asgi:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
