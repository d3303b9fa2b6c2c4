"""
Initialize command for nexus-staging CLI.

This module opens the staging repository for a build (when the version
is a release) and prints the URL that artifacts should be uploaded to.
"""

import logging
import sys
from typing import Optional

import click

from ..exceptions import StagingError
from ..utils import setup_logging
from ..utils.error_handling import handle_generic_error, handle_staging_error
from ..utils.publish_helper import PublishHelper
from ..utils.staging_coordinator import StagingCoordinator
from .context import settings_or_exit


@click.command()
@click.option("--package-group", help="Group matched against staging profile names")
@click.option("--staging-profile-id", help="Staging profile id (skips the profile lookup)")
@click.option("--project-version", help="Project version; -SNAPSHOT versions use the snapshot repository")
@click.option(
    "--use-staging/--no-staging",
    default=None,
    help="Force or disable staging (default: derived from --project-version)",
)
@click.option("--description", help="Description of the staging repository")
@click.option("--snapshot-repository-url", help="Repository URL used when staging is disabled")
@click.pass_context
def initialize(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    package_group: Optional[str],
    staging_profile_id: Optional[str],
    project_version: Optional[str],
    use_staging: Optional[bool],
    description: Optional[str],
    snapshot_repository_url: Optional[str],
) -> None:
    """Open a staging repository and print the URL to publish to."""
    setup_logging(ctx.obj["debug"])

    settings = settings_or_exit(
        ctx,
        package_group=package_group,
        staging_profile_id=staging_profile_id,
        version=project_version,
        use_staging=use_staging,
        description=description,
        snapshot_repository_url=snapshot_repository_url,
    )

    coordinator = StagingCoordinator()
    helper = PublishHelper(coordinator)
    try:
        with coordinator.build_session():
            repository_url = helper.resolve_repository_url(settings)
    except StagingError as e:
        handle_staging_error(e, "initialize operation")
        sys.exit(1)
    except Exception as e:
        handle_generic_error(e, "initialize operation")
        sys.exit(1)

    logging.info("Repository '%s' resolved", settings.repository_name)
    click.echo(f"REPOSITORY URL: {repository_url}")


__all__ = ["initialize"]
