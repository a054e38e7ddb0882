"""Pytest configuration and fixtures for neo-userinfo tests."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from neo_userinfo.config import UserInfoSettings
from neo_userinfo.repositories import DirectoryUserInfoRepository


class FakeClock:
    """Manually advanced time source, in seconds."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 0.0, **kwargs) -> None:
        self.now += seconds + timedelta(**kwargs).total_seconds()


@pytest.fixture
def clock():
    """Fake clock for expiration tests."""
    return FakeClock()


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return UserInfoSettings(
        email_suffix="@example.com",
        cache_expire_after_access=timedelta(days=14),
    )


@pytest.fixture
def sample_attributes():
    """Full directory entry for a user."""
    return {
        "uid": "jdoe",
        "cn": "John Doe",
        "mail": "jdoe@example.com",
        "telephoneNumber": "+1 555 0100",
        "displayName": "John Doe",
        "givenName": "John",
        "sn": "Doe",
        "initials": "Q",
        "labeledURI": "https://people.example.com/jdoe",
        "organizationName": "https://www.example.com",
    }


@pytest.fixture
def directory(sample_attributes):
    """Mock directory search collaborator.

    Knows "jdoe" and "alice"; every other username has no entry.
    """
    entries = {
        "jdoe": sample_attributes,
        "alice": {"uid": "alice", "mail": "alice@example.com"},
    }
    mock_directory = MagicMock()
    mock_directory.search_for_user.side_effect = lambda username: entries.get(username)
    return mock_directory


@pytest.fixture
def repository(directory, settings, clock):
    """Repository wired to the mock directory and fake clock."""
    return DirectoryUserInfoRepository(directory, settings=settings, clock=clock)
