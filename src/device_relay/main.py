"""CLI entrypoint for the relay server."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from device_relay import __version__
from device_relay.config import RelaySettings
from device_relay.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="device-relay",
        description="Relay API for device messages and trigger commands",
    )
    parser.add_argument("--version", action="version", version=f"device-relay {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument(
        "--host",
        default=None,
        help="Interface to bind (defaults to RELAY_HOST or 0.0.0.0)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (defaults to PORT or 3000)",
    )
    serve.add_argument(
        "--log-level",
        default=None,
        help="Root logging level (defaults to LOG_LEVEL or INFO)",
    )
    return parser


def _resolve_settings(args: argparse.Namespace) -> RelaySettings:
    settings = RelaySettings()
    overrides: dict[str, object] = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.log_level:
        overrides["log_level"] = args.log_level
    if not overrides:
        return settings
    return RelaySettings.model_validate({**settings.model_dump(), **overrides})


def serve(settings: RelaySettings) -> None:
    import uvicorn

    from device_relay.server import create_app

    app = create_app(settings)
    logger.info(
        "Server starting",
        extra={"host": settings.host, "port": settings.port, "version": __version__},
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    if args.command == "serve":
        try:
            serve(settings)
        except Exception:
            logger.exception("Server failed")
            return 1
        return 0

    logger.error("Unknown command", extra={"command": args.command})
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
