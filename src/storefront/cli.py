#!/usr/bin/env python3
"""
Main CLI entry point for the Storefront backend server.
"""

import os
import sys

import click
import uvicorn

from storefront import __version__
from storefront.config import settings
from storefront.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="storefront")
def cli() -> None:
    """Storefront CLI - run the API server and inspect the seed catalog."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
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
@click.option(
    "--empty",
    is_flag=True,
    default=False,
    help="Start with an empty catalog instead of the seed data",
)
def serve(host: str, port: int, reload: bool, log_level: str, empty: bool) -> None:
    """Start the Storefront API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting Storefront API server", host=host, port=port, reload=reload)

    # The app factory reads settings; the reloader's child process only sees the environment
    settings.log_level = log_level
    os.environ["STOREFRONT_LOG_LEVEL"] = log_level
    if log_level == "debug":
        settings.debug = True
        os.environ["STOREFRONT_DEBUG"] = "true"
    if empty:
        settings.seed_on_startup = False
        os.environ["STOREFRONT_SEED_ON_STARTUP"] = "false"

    try:
        uvicorn.run(
            "storefront.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def seed() -> None:
    """Print a summary of the seed catalog."""
    from storefront.store.filters import average_rating
    from storefront.store.memory import CatalogStore

    store = CatalogStore.from_seed()
    for category in store.get_categories():
        products = store.get_products_by_category_id(category.id)
        click.echo(f"{category.name} ({category.id}): {len(products)} products")
        for product in products:
            avg = average_rating(store.get_reviews_by_product_id(product.id))
            rating = f"{avg:.1f}" if avg is not None else "-"
            sale = " [sale]" if product.on_sale else ""
            click.echo(f"  {product.name}  ${product.price:.2f}  rating {rating}{sale}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
