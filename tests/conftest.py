"""
Test fixtures and mock data for nexus-staging tests.

This module provides common fixtures, mock data, and utilities
for testing the nexus-staging package.
"""

from unittest.mock import MagicMock, Mock

import pytest
import respx

from nexus_staging.api import StagingClient

BASE_URL = "https://nexus.example.com/service/local/"
PROFILES_URL = "https://nexus.example.com/service/local/staging/profiles"
START_URL = "https://nexus.example.com/service/local/staging/profiles/prof-1/start"
STAGING_URL = "https://nexus.example.com/service/local/staging/deployByRepositoryId/repo-9"


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock:
        yield respx


@pytest.fixture
def staging_client():
    """StagingClient with credentials, closed after the test."""
    client = StagingClient(BASE_URL, username="deployer", password="secret")
    yield client
    client.close()


@pytest.fixture
def profiles_data():
    """Staging profile list as returned by GET staging/profiles."""
    return [
        {"id": "prof-0", "name": "org.other", "mode": "BOTH"},
        {"id": "prof-1", "name": "com.example", "mode": "BOTH"},
    ]


@pytest.fixture
def temp_config(tmp_path):
    """Config file with a [nexus] section pointing at the test server."""
    config_path = tmp_path / "staging.toml"
    config_path.write_text(
        "[nexus]\n"
        f'server_url = "{BASE_URL}"\n'
        'username = "deployer"\n'
        'password = "secret"\n'
        'package_group = "com.example"\n'
    )
    return str(config_path)


def make_fake_client(profile_id="prof-1", repository_id="repo-9"):
    """Build a StagingClient double that resolves one profile and opens one repository."""
    client = MagicMock(spec=StagingClient)
    client.__enter__.return_value = client
    client.find_staging_profile_id.return_value = profile_id
    client.create_staging_repository.return_value = repository_id
    client.get_staging_repository_uri.side_effect = (
        lambda staging_repository_id: f"{BASE_URL.rstrip('/')}/staging/deployByRepositoryId/{staging_repository_id}"
    )
    return client


@pytest.fixture
def fake_client_maker():
    """Provide make_fake_client to tests that need several client doubles."""
    return make_fake_client


@pytest.fixture
def fake_client():
    """StagingClient double (see make_fake_client)."""
    return make_fake_client()


@pytest.fixture
def client_factory(fake_client):
    """Client factory returning the fake_client double."""
    return Mock(return_value=fake_client)
