"""
Shared fixtures: a gateway double that records every request.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from atrium.modules.users.services.user_directory import UserDirectoryClient


class FakeGateway:
    """Gateway double: request(path) returns one MagicMock per path with AsyncMock verbs."""

    def __init__(self):
        self.paths = []
        self.resource = MagicMock()
        self.resource.get = AsyncMock()
        self.resource.post = AsyncMock()
        self.resource.put = AsyncMock()
        self.resource.delete = AsyncMock()

    def request(self, path):
        self.paths.append(path)
        return self.resource


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def directory(gateway):
    """UserDirectoryClient wired to the fake gateway."""
    return UserDirectoryClient(gateway)


@pytest.fixture
def administrator_payload():
    return {
        "entity-type": "user",
        "id": "Administrator",
        "properties": {
            "username": "Administrator",
            "firstName": "",
            "lastName": "",
            "email": "devnull@example.com",
            "groups": ["administrators"],
        },
        "extendedGroups": [{"name": "administrators", "label": "Administrators group"}],
        "isAdministrator": True,
    }
