"""Shared HTTP server plumbing for the services."""

import logging

from flask import Flask

from .config import ServerConfig

logger = logging.getLogger(__name__)

MAX_HEADER_BYTES = 1 << 20


def health():
    """Health check: empty body, status 200."""
    return "", 200


def register_health(app: Flask) -> Flask:
    app.add_url_rule("/manage/health", "health", health, methods=["GET"])
    return app


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        host, port = "", address
    if not port.isdigit():
        raise ValueError(f"invalid listen address: {address!r}")
    return host or "0.0.0.0", int(port)


def serve(app: Flask, server_config: ServerConfig) -> None:
    """Serve app on the configured address until interrupted."""
    host, port = _split_address(server_config.port)
    logger.info("Listening on %s:%d", host, port)
    app.run(host=host, port=port, threaded=True)