#!/usr/bin/env python3
"""
Main CLI entry point for the Portfolio API server.
"""

import asyncio
import os
import sys

import click
import uvicorn
from pydantic import ValidationError

from portfolio_api import __version__
from portfolio_api.logging import configure_logging, get_logger

logger = get_logger(__name__)


def load_settings():
    """Load settings, exiting with a readable message when required values are missing."""
    try:
        from portfolio_api.config import settings
    except ValidationError as e:
        missing = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        logger.error("Invalid configuration", error=str(e))
        click.echo(f"✗ Missing or invalid configuration: {missing}", err=True)
        sys.exit(1)
    return settings


@click.group()
@click.version_option(version=__version__, prog_name="portfolio-api")
def cli() -> None:
    """Portfolio API CLI - run the server and check its configuration."""
    pass


@cli.command()
@click.option("--host", default=None, help="Host to bind to (default: from settings)")
@click.option("--port", default=None, type=int, help="Port to bind to (default: from settings)")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Start the Portfolio API server."""

    debug = log_level == "debug"
    configure_logging(debug=debug, level=log_level)

    # The app module configures logging from settings on import, and reload
    # workers import it in a fresh process; both must see the CLI level
    os.environ["PORTFOLIO_LOG_LEVEL"] = log_level
    if debug:
        os.environ["PORTFOLIO_DEBUG"] = "true"
    else:
        os.environ.setdefault("PORTFOLIO_DEBUG", "false")

    settings = load_settings()
    settings.log_level = log_level
    settings.debug = debug or settings.debug

    host = host or settings.api_host
    port = port or settings.api_port

    logger.info(
        "Starting Portfolio API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        if reload:
            uvicorn.run(
                "portfolio_api.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from portfolio_api.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("check-config")
def check_config() -> None:
    """Load settings and ping the database."""
    configure_logging()
    settings = load_settings()

    from portfolio_api.database.connection import close_client
    from portfolio_api.validation import (
        get_startup_recommendations,
        validate_startup_configuration,
    )

    async def do_check():
        try:
            return await validate_startup_configuration()
        finally:
            await close_client()

    results = asyncio.run(do_check())

    click.echo(f"Listen address: {settings.api_host}:{settings.api_port}")
    click.echo(f"Environment: {settings.environment}")
    click.echo(f"Database: {settings.database_name}")
    click.echo(f"Owner email: {settings.user_email or '(not set)'}")

    for recommendation in get_startup_recommendations(results):
        click.echo(f"  - {recommendation}")

    if not results["overall_valid"]:
        for error in results["database"]["errors"]:
            click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration OK")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
