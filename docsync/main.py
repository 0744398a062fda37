"""
docsync — CLI entrypoint.

Run after the OpenAPI scraper has written fresh pages into the scratch
directory.

Usage:
    docsync
    docsync --verbose
    docsync --config path/to/docsync.yml
    python -m docsync.main --help
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from docsync import __version__
from docsync.core.observability.logging_config import (
    FILE_ENV,
    FILE_LEVEL_ENV,
    resolve_level,
    setup_logging,
)


@click.command()
@click.version_option(version=__version__, prog_name="docsync")
@click.option("--verbose", "-v", is_flag=True, help="Log each stage to stderr.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to docsync.yml (default: auto-detect).",
)
def cli(verbose: bool, quiet: bool, debug: bool, config_path: str | None) -> None:
    """Reconcile freshly scraped API reference pages with the curated set.

    Duplicate pages are dropped, pages for removed endpoints are deleted
    after confirmation, and new pages are named and moved into place.
    """
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(FILE_ENV),
        log_file_level=os.environ.get(FILE_LEVEL_ENV),
    )

    from docsync.adapters.console import ClickConsole
    from docsync.core.config.loader import ConfigError, load_config
    from docsync.core.use_cases.sync import run_sync

    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        return

    result = run_sync(config, ClickConsole())

    # Errors are reported, not signalled: the exit code stays 0.
    if result.error:
        click.secho(f"❌ {result.error}", fg="red")


if __name__ == "__main__":
    cli()
