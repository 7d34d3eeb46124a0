"""CLI interface for wrkrdocs.

Command-line tool for previewing the documentation site and exporting its
navigation, canonical URLs and structured data.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from wrkrdocs.config import Config
from wrkrdocs.core.matching import resolve_active
from wrkrdocs.core.navigation import NAVIGATION, aliased_hrefs, route_index
from wrkrdocs.core.site import normalize_path
from wrkrdocs.core.structured_data import (
    HOME_FAQ,
    WRKR_APPLICATION,
    faq_page,
    software_application,
)

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover wrkrdocs.toml)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def cli(verbose: bool) -> None:
    """wrkrdocs - navigation and metadata for the Wrkr documentation site."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@config_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--origin",
    default=None,
    help="Site origin, e.g. https://example.github.io (overrides config)",
)
@click.option(
    "--base-path",
    default=None,
    help="Deployment sub-path, e.g. /wrkr (overrides config)",
)
@click.option(
    "--dev",
    is_flag=True,
    help="Serve from the site root without the deployment base path",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log every rendered page",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    origin: str | None,
    base_path: str | None,
    dev: bool,
    verbose: bool,
) -> None:
    """Start the preview server."""
    from wrkrdocs.server import run_server

    if verbose:
        logging.getLogger("wrkrdocs").setLevel(logging.INFO)
    if dev:
        base_path = ""
    config = _load_config(
        config_path,
        host=host,
        port=port,
        origin=origin,
        base_path=base_path,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Site root: {config.site.root_url}")
    if config.site.base_path:
        click.echo(f"Base path: {config.site.base_path}")
    else:
        click.echo("Base path: none (serving from root)")

    run_server(config, verbose=verbose)


@cli.command()
@click.option(
    "--path",
    "current_path",
    default=None,
    help="Current route path; adds active flags to every node",
)
def nav(current_path: str | None) -> None:
    """Print the navigation tree as JSON."""
    if current_path is None:
        items: list[Any] = [item.to_dict() for item in NAVIGATION]
    else:
        items = [node.to_dict() for node in resolve_active(NAVIGATION, normalize_path(current_path))]
    _echo_json({"items": items})


@cli.command()
@click.option(
    "--aliases",
    is_flag=True,
    help="Also list hrefs that appear under more than one title",
)
def routes(aliases: bool) -> None:
    """Print the route index used for discovery resources."""
    data: dict[str, Any] = {"routes": route_index(NAVIGATION)}
    if aliases:
        data["aliases"] = aliased_hrefs(NAVIGATION)
    _echo_json(data)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@config_option
@click.option(
    "--base-path",
    default=None,
    help="Deployment sub-path (overrides config)",
)
def canonical(paths: tuple[str, ...], config_path: Path | None, base_path: str | None) -> None:
    """Print canonical URLs for route paths."""
    config = _load_config(config_path, base_path=base_path)
    for path in paths:
        click.echo(config.site.canonical_url(path))


@cli.command("structured-data")
@click.option(
    "--kind",
    type=click.Choice(["app", "faq", "all"]),
    default="all",
    show_default=True,
    help="Descriptor to print",
)
def structured_data(kind: str) -> None:
    """Print JSON-LD descriptors for the home page."""
    descriptors: list[dict[str, Any]] = []
    if kind in ("app", "all"):
        descriptors.append(software_application(WRKR_APPLICATION))
    if kind in ("faq", "all"):
        descriptors.append(faq_page(HOME_FAQ))
    _echo_json(descriptors[0] if len(descriptors) == 1 else descriptors)


def _load_config(config_path: Path | None, **overrides: Any) -> Config:
    """Load configuration and apply overrides or exit with error.

    Raises:
        SystemExit: If configuration is missing or invalid
    """
    try:
        return Config.load(config_path).with_overrides(**overrides)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
