"""
Tests for Pydantic models.

This module covers the Nexus API payload models and the publish settings.
"""

import pytest
from pydantic import ValidationError

from nexus_staging.models import (
    Description,
    PublishSettings,
    StagingProfile,
    StagingProfileList,
    StagingRepository,
)


class TestStagingProfileModels:
    """Test staging profile models."""

    def test_profile_keeps_extra_fields(self):
        """Test that unknown API fields are accepted."""
        profile = StagingProfile(id="prof-1", name="com.example", mode="BOTH")

        assert profile.id == "prof-1"
        assert profile.model_extra == {"mode": "BOTH"}

    def test_profile_requires_id_and_name(self):
        """Test that id and name are required."""
        with pytest.raises(ValidationError):
            StagingProfile(name="com.example")

    def test_profile_list_find_id(self, profiles_data):
        """Test matching a package group against profile names."""
        profiles = StagingProfileList.model_validate(profiles_data)

        assert profiles.find_id("com.example") == "prof-1"
        assert profiles.find_id("com.Example") is None
        assert StagingProfileList([]).find_id("com.example") is None

    def test_numeric_profile_id(self):
        """Test that a profile id sent as a JSON number is read as text."""
        profiles = StagingProfileList.model_validate([{"id": 12, "name": "com.example"}])

        assert profiles.find_id("com.example") == "12"

    def test_profile_list_first_match(self):
        """Test that the first of several matching profiles wins."""
        profiles = StagingProfileList.model_validate(
            [{"id": "first", "name": "com.example"}, {"id": "second", "name": "com.example"}]
        )

        assert profiles.find_id("com.example") == "first"


class TestStagingRepositoryModels:
    """Test staging repository models."""

    def test_description_envelope_flag(self):
        """Test which payloads travel inside the envelope."""
        assert Description.wrap_in_envelope is True
        assert StagingRepository.wrap_in_envelope is False
        assert StagingProfileList.wrap_in_envelope is False

    def test_description_ignores_extra_fields(self):
        """Test that the server echo may carry more fields."""
        description = Description.model_validate({"description": "Build #42", "extra": 1})

        assert description.model_dump() == {"description": "Build #42"}

    def test_staging_repository_alias(self):
        """Test reading the repository id from its wire name."""
        repository = StagingRepository.model_validate({"stagedRepositoryId": "repo-9", "description": "x"})

        assert repository.staged_repository_id == "repo-9"
        assert StagingRepository(staged_repository_id="repo-9").model_dump(by_alias=True)["stagedRepositoryId"] == (
            "repo-9"
        )

    @pytest.mark.parametrize("data", [{}, {"stagedRepositoryId": ""}, {"stagedRepositoryId": None}])
    def test_staging_repository_requires_id(self, data):
        """Test that a missing or empty repository id is rejected."""
        with pytest.raises(ValidationError):
            StagingRepository.model_validate(data)


class TestPublishSettings:
    """Test PublishSettings."""

    def test_defaults(self):
        """Test the defaults used without any configuration."""
        settings = PublishSettings()

        assert settings.server_url == "https://oss.sonatype.org/service/local/"
        assert settings.snapshot_repository_url == "https://oss.sonatype.org/content/repositories/snapshots/"
        assert settings.repository_name == "nexus"
        assert settings.description == "Created by nexus-staging"
        assert settings.staging_enabled is True

    @pytest.mark.parametrize(
        "version,use_staging,expected",
        [
            ("1.0.0", None, True),
            ("1.0.0-SNAPSHOT", None, False),
            (None, None, True),
            ("1.0.0-SNAPSHOT", True, True),
            ("1.0.0", False, False),
        ],
    )
    def test_staging_enabled(self, version, use_staging, expected):
        """Test deriving the staging switch from the version."""
        settings = PublishSettings(version=version, use_staging=use_staging)

        assert settings.staging_enabled is expected

    def test_password_hidden_from_repr(self):
        """Test that the password does not leak into log output."""
        settings = PublishSettings(username="deployer", password="secret")

        assert "secret" not in repr(settings)
        assert "deployer" in repr(settings)

    @pytest.mark.parametrize("field", ["server_url", "snapshot_repository_url"])
    def test_invalid_url(self, field):
        """Test that repository URLs must be http(s) URLs."""
        with pytest.raises(ValidationError, match="must start with http"):
            PublishSettings(**{field: "nexus.example.com"})

    def test_unknown_field_rejected(self):
        """Test that typos in the configuration are reported."""
        with pytest.raises(ValidationError):
            PublishSettings(server="https://nexus.example.com/")

    def test_assignment_is_validated(self):
        """Test that later assignments are validated too."""
        settings = PublishSettings()

        with pytest.raises(ValidationError):
            settings.server_url = "ftp://nexus.example.com/"
