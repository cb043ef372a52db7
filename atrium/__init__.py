"""
Atrium

Async client for the user-management REST endpoints of a remote
content-management platform.
"""

from atrium.client import PlatformClient
from atrium.modules.settings import PlatformSettings
from atrium.modules.options import RequestOptions
from atrium.modules.users.domain import UserRecord
from atrium.modules.users.services import UserDirectoryClient

__version__ = "0.1.0"

__all__ = [
    "PlatformClient",
    "PlatformSettings",
    "RequestOptions",
    "UserRecord",
    "UserDirectoryClient",
]
