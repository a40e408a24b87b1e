"""CLI interface for shelfnav.

Command-line tool for resolving documentation sidebars.
"""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from shelfnav.config import Config
from shelfnav.core.content import ContentError
from shelfnav.core.errors import ConfigError
from shelfnav.core.resolver import EmptySectionPolicy
from shelfnav.core.site import SiteManifest, build_site


@click.group()
def cli() -> None:
    """shelfnav - Sidebar navigation for documentation sites."""


def _common_options(func):
    """Options shared by every command that loads configuration."""
    func = click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose output (debug logging)",
    )(func)
    func = click.option(
        "--empty-sections",
        type=click.Choice([p.value for p in EmptySectionPolicy]),
        default=None,
        help="Policy for auto-generated sections without pages (overrides config)",
    )(func)
    func = click.option(
        "--content-dir",
        type=click.Path(exists=True, path_type=Path, file_okay=False),
        default=None,
        help="Content root directory (overrides config)",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, path_type=Path, dir_okay=False),
        default=None,
        help="Path to configuration file (default: auto-discover shelfnav.toml)",
    )(func)
    return func


@cli.command()
@_common_options
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write JSON to this file instead of stdout",
)
def resolve(
    config_path: Path | None,
    content_dir: Path | None,
    empty_sections: str | None,
    verbose: bool,
    output: Path | None,
) -> None:
    """Resolve the sidebar and print the site manifest as JSON."""
    _configure_logging(verbose)
    config = _load_config(config_path, content_dir, empty_sections)
    manifest = _build_or_exit(config)

    text = json.dumps(manifest.to_dict(), indent=2, ensure_ascii=False)
    if output is None:
        click.echo(text)
        return

    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Wrote {output}", err=True)


@cli.command()
@_common_options
def check(
    config_path: Path | None,
    content_dir: Path | None,
    empty_sections: str | None,
    verbose: bool,
) -> None:
    """Validate the sidebar against the content directory."""
    _configure_logging(verbose)
    config = _load_config(config_path, content_dir, empty_sections)
    manifest = _build_or_exit(config)

    click.echo(
        click.style(
            f"Sidebar OK: {len(manifest.sidebar.items)} top-level entries",
            fg="green",
        )
    )


@cli.command()
@_common_options
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
def serve(
    config_path: Path | None,
    content_dir: Path | None,
    empty_sections: str | None,
    verbose: bool,
    host: str | None,
    port: int | None,
) -> None:
    """Serve the resolved sidebar over HTTP."""
    from shelfnav.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path, content_dir, empty_sections)
    config = config.with_overrides(host=host, port=port)
    # Fail before binding the port
    manifest = _build_or_exit(config)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Content directory: {config.content.root}")
    run_server(config, manifest)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(
    config_path: Path | None,
    content_dir: Path | None,
    empty_sections: str | None,
) -> Config:
    """Load configuration with CLI overrides or exit with error.

    Args:
        config_path: Explicit config file, None to auto-discover
        content_dir: CLI-provided content root
        empty_sections: CLI-provided empty section policy

    Returns:
        Effective configuration

    Raises:
        SystemExit: If the configuration cannot be loaded
    """
    try:
        config = Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))

    return config.with_overrides(
        content_root=content_dir,
        empty_sections=EmptySectionPolicy(empty_sections) if empty_sections else None,
    )


def _build_or_exit(config: Config) -> SiteManifest:
    """Build the site manifest or exit with error.

    Raises:
        SystemExit: If the sidebar cannot be resolved
    """
    try:
        return build_site(config)
    except (ConfigError, ContentError) as e:
        _fail(str(e))


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
