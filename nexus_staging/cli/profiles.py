"""
Profiles command for nexus-staging CLI.

This module lists the staging profiles of a server, or resolves the
profile id that matches one package group.
"""

import logging
from typing import Optional

import click

from ..api import StagingClient
from ..models.context import PublishSettings
from ..utils import setup_logging
from ..utils.error_handling import log_and_exit, with_error_handling
from .context import settings_or_exit


@with_error_handling("list staging profiles", exit_on_error=True)
def _show_profiles(settings: PublishSettings, package_group: Optional[str]) -> None:
    with StagingClient(settings.server_url, username=settings.username, password=settings.password) as client:
        if package_group:
            profile_id = client.find_staging_profile_id(package_group)
            if profile_id is None:
                log_and_exit(f"No staging profile found for package group: {package_group}")
            click.echo(profile_id)
            return

        staging_profiles = client.list_staging_profiles()
        logging.info("Found %d staging profiles on %s", len(staging_profiles), settings.server_url)
        for profile in staging_profiles:
            click.echo(f"{profile.id}\t{profile.name}")


@click.command()
@click.option("--package-group", help="Print only the id of the profile with this name")
@click.pass_context
def profiles(ctx: click.Context, package_group: Optional[str]) -> None:
    """List the staging profiles of the Nexus server."""
    setup_logging(ctx.obj["debug"])

    settings = settings_or_exit(ctx)
    _show_profiles(settings, package_group)


__all__ = ["profiles"]
