"""
PublishHelper for choosing the repository each project publishes to.

Snapshot versions go to the snapshot repository; everything else goes to
the staging repository that the coordinator opens for the server.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Optional

from ..models.context import PublishSettings
from .constants import DEFAULT_MAX_WORKERS
from .staging_coordinator import StagingCoordinator


class PublishHelper:
    """
    Resolves the upload URL for one or more projects of a build.

    All projects share the helper's coordinator, so projects that publish
    to the same server share one staging repository.
    """

    def __init__(self, coordinator: Optional[StagingCoordinator] = None) -> None:
        """
        Initialize the helper.

        Args:
            coordinator: Coordinator of the current build session
        """
        self.coordinator = coordinator if coordinator is not None else StagingCoordinator()

    def resolve_repository_url(self, settings: PublishSettings) -> str:
        """
        Get the URL that the artifacts of one project are uploaded to.

        Args:
            settings: Publish settings of the project

        Returns:
            Snapshot repository URL, or the staging repository URL when staging is enabled
        """
        if not settings.staging_enabled:
            url = settings.snapshot_repository_url
        else:
            if not settings.package_group and not settings.staging_profile_id:
                raise ValueError("Staging requires a package group or a staging profile id")
            url = self.coordinator.get_or_create_staging_repository_url(
                settings.server_url,
                settings.package_group,
                username=settings.username,
                password=settings.password,
                description=settings.description,
                staging_profile_id=settings.staging_profile_id,
            )

        logging.info("Uploading to %s", url)
        return url

    def resolve_repository_urls(
        self, settings_by_project: Dict[str, PublishSettings], max_workers: int = DEFAULT_MAX_WORKERS
    ) -> Dict[str, str]:
        """
        Resolve upload URLs for several projects concurrently.

        Args:
            settings_by_project: Publish settings keyed by project name
            max_workers: Maximum number of concurrent workers

        Returns:
            Dictionary mapping project names to upload URLs
        """
        urls: Dict[str, str] = {}
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="publish") as executor:
            future_to_project = {
                executor.submit(self.resolve_repository_url, settings): project
                for project, settings in settings_by_project.items()
            }
            for future in as_completed(future_to_project):
                project = future_to_project[future]
                try:
                    urls[project] = future.result()
                except Exception as e:
                    logging.error("Failed to resolve repository for %s: %s", project, e)
                    raise
        return urls


__all__ = ["PublishHelper"]
