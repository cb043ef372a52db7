"""
Platform Settings

Connection settings for the remote platform, read from the environment
(and an optional .env file).
"""
import os
from typing import Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel

from atrium.modules.options import RequestOptions

DEFAULT_BASE_URL = "http://localhost:8080/platform"
DEFAULT_API_PATH = "api/v1"
DEFAULT_TIMEOUT = 30.0

ENV_VARS = {
    "base_url": "ATRIUM_BASE_URL",
    "api_path": "ATRIUM_API_PATH",
    "username": "ATRIUM_USERNAME",
    "password": "ATRIUM_PASSWORD",
    "token": "ATRIUM_TOKEN",
    "timeout": "ATRIUM_TIMEOUT",
    "repository_name": "ATRIUM_REPOSITORY",
}


class PlatformSettings(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    api_path: str = DEFAULT_API_PATH
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    repository_name: Optional[str] = None

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "PlatformSettings":
        """Build settings from ATRIUM_* environment variables; unset ones keep their defaults."""
        load_dotenv(env_file)
        values = {}
        for field_name, env_var in ENV_VARS.items():
            value = os.getenv(env_var)
            if value is not None and value != "":
                values[field_name] = value
        return cls(**values)

    @property
    def api_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_path.strip('/')}/"

    @property
    def auth(self) -> Optional[httpx.BasicAuth]:
        if self.username and self.password:
            return httpx.BasicAuth(self.username, self.password)
        return None

    def base_options(self) -> RequestOptions:
        """Options every request starts from before per-component and per-call overrides."""
        return RequestOptions(timeout=self.timeout, repository_name=self.repository_name)
