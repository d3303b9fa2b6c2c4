"""
Unified CLI entry point for nexus-staging operations using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import initialize, profiles
from .._version import __version__


# ============================================================================
# CLI Group
# ============================================================================


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="nexus-staging")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config file (default: ~/.config/nexus/staging.toml)",
)
@click.option("--server-url", help="Base URL of the Nexus REST API (overrides config)")
@click.option("--username", help="Username for HTTP Basic authentication (overrides config)")
@click.option(
    "--password",
    envvar="NEXUS_PASSWORD",
    help="Password for HTTP Basic authentication (overrides config, env: NEXUS_PASSWORD)",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    config: Optional[str],
    server_url: Optional[str],
    username: Optional[str],
    password: Optional[str],
    debug: int,
) -> None:
    """Nexus Staging - Open staging repositories on a Nexus repository manager."""
    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["server_url"] = server_url
    ctx.obj["username"] = username
    ctx.obj["password"] = password
    ctx.obj["debug"] = debug


# Register subcommands
cli.add_command(profiles.profiles)
cli.add_command(initialize.initialize)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
