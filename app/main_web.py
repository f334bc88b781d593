import argparse
import sys

import uvicorn

from app.config import Config
from app.exceptions import ConfigurationError
from app.logger import Logger, session_logger
from app.sessions import SessionStore
from app.startup import resolve_page_storage, validate_environment
from app.web_server import DatagenWebServer

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="datagen Web Server - fake data generation REST API")
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host address to bind to (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on (default: 3000, or DATAGEN_WEB_PORT env var)",
    )
    parser.add_argument(
        "--session-ttl",
        type=int,
        default=None,
        help="Pagination session TTL in seconds (default: 600, or DATAGEN_SESSION_TTL_SECONDS)",
    )
    parser.add_argument(
        "--mirror-dir",
        type=str,
        default=None,
        help="Mirror generated pages to this directory (default: off unless DATAGEN_MIRROR_PAGES is set)",
    )
    parser.add_argument(
        "--no-mirror",
        action="store_true",
        help="Disable page mirroring even if DATAGEN_MIRROR_PAGES is set",
    )
    parser.add_argument(
        "--no-housekeeper",
        action="store_true",
        help="Do not run the background session sweeper",
    )
    return parser


def build_server(args: argparse.Namespace) -> DatagenWebServer:
    """Build the web server from parsed CLI arguments; CLI values win over env vars."""
    ttl_seconds = args.session_ttl or Config.get_session_ttl_seconds()
    page_storage = resolve_page_storage(args.mirror_dir, args.no_mirror, logger)
    return DatagenWebServer(
        session_store=SessionStore(ttl_seconds=ttl_seconds, logger=logger),
        page_storage=page_storage,
        enable_housekeeper=not args.no_housekeeper,
    )


def main() -> None:
    args = build_parser().parse_args()

    try:
        validate_environment(logger)
        port = args.port or Config.get_web_port()
        server = build_server(args)
    except ConfigurationError as e:
        logger.error("FATAL: Invalid configuration", error=str(e))
        sys.exit(1)
    ttl_seconds = server.session_store.ttl_seconds

    try:
        logger.info(
            "Starting web server",
            host=args.host,
            port=port,
            transport="HTTP REST API",
            session_ttl_seconds=ttl_seconds,
        )
        uvicorn.run(server.app, host=args.host, port=port)
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
