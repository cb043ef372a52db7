"""
Platform Client

Entry point: owns the request gateway and hands out resource accessors.

    async with PlatformClient() as platform:
        user = await platform.users().fetch("Administrator")
"""
import logging
from typing import Optional

from atrium.modules.request_gateway import HttpRequestGateway, RequestGateway, ResourceRequest
from atrium.modules.settings import PlatformSettings
from atrium.modules.users.services.user_directory import OptionsLike, UserDirectoryClient

logger = logging.getLogger("atrium.client")


class PlatformClient:
    def __init__(
        self,
        settings: Optional[PlatformSettings] = None,
        gateway: Optional[RequestGateway] = None
    ):
        self.settings = settings or PlatformSettings.from_env()
        self.gateway = gateway or HttpRequestGateway(self.settings)
        logger.debug(f"[PlatformClient] api_url={self.settings.api_url}")

    def request(self, path: str) -> ResourceRequest:
        return self.gateway.request(path)

    def users(self, defaults: OptionsLike = None) -> UserDirectoryClient:
        """User accessor; defaults override the settings-level options."""
        return UserDirectoryClient(self.gateway, self.settings.base_options().merge(defaults))

    async def aclose(self):
        aclose = getattr(self.gateway, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "PlatformClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
