"""Application entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import Optional

from werkzeug.serving import run_simple

from cleanapi.config import ConfigError, load_config
from cleanapi.container import AppContainer, build_container
from cleanapi.middleware import LoggerMiddleware
from cleanapi.routes import Router, register_routes
from cleanapi.version import load_version

logger = logging.getLogger(__name__)


def register_app_routes(router: Router, container: AppContainer) -> None:
    """Attach the container's handlers to *router*."""
    register_routes(router, container.user_handler)
    router.add("GET", "/health", container.health_handler.status)


def create_app(container: AppContainer) -> LoggerMiddleware:
    """Return the WSGI application for *container*, with request logging."""
    router = Router()
    register_app_routes(router, container)
    return LoggerMiddleware(router)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Load the configuration, build the application and serve it over HTTP."""
    argparse.ArgumentParser(description="Run the user API server.").parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        config = load_config()
    except ConfigError as exc:
        logger.error("failed to load configuration: %s", exc)
        return

    try:
        version = load_version("VERSION")
    except OSError as exc:
        logger.warning("failed to load version: %s", exc)
        version = ""

    app = create_app(build_container(version))
    addr = ":" + config.port
    logger.info("starting HTTP server on %s", addr)
    try:
        run_simple("0.0.0.0", int(config.port), app)
    except (OSError, ValueError) as exc:
        logger.error("server error: %s", exc)


if __name__ == "__main__":
    main()