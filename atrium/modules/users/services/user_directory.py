"""
User Directory

Maps fetch / create / update / delete onto the platform's `user` REST
resource and wraps responses into UserRecord objects.
"""
import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Tuple, Union

from atrium.modules.exceptions import InvalidArgumentError
from atrium.modules.options import RequestOptions
from atrium.modules.path_utils import join
from atrium.modules.request_gateway import RequestGateway
from atrium.modules.users.domain.user import UserRecord

logger = logging.getLogger("atrium.users.directory")

USER_PATH = "user"

OptionsLike = Union[RequestOptions, Mapping[str, Any], None]
UserLike = Union[UserRecord, Mapping[str, Any]]


class UserDirectoryClient:
    """
    Works with users on a platform instance.

    Every operation is one request through the injected gateway. Records
    returned by fetch/create/update keep a reference to this client so
    they can be saved or deleted directly.

    Example:
        users = platform.users()
        user = await users.fetch("Administrator")
        # user.id == "Administrator"
        # user.properties["username"] == "Administrator"
    """

    def __init__(self, gateway: RequestGateway, defaults: OptionsLike = None):
        self._gateway = gateway
        self.defaults = RequestOptions.coerce(defaults)

    async def fetch(self, username: str, opts: OptionsLike = None) -> UserRecord:
        """GET user/{username}."""
        _require_identifier(username, "username", "fetch")
        options = self._entity_options(opts)
        path = join(USER_PATH, username)
        logger.debug(f"[UserDirectoryClient.fetch] username={username}")
        res = await self._gateway.request(path).get(options)
        return UserRecord.from_dict(res, directory=self)

    async def create(self, user: UserLike, opts: OptionsLike = None) -> UserRecord:
        """
        POST user with {"entity-type": "user", "properties": ...}.

        Any body in opts is replaced by the user payload. An id on the draft
        is not sent; the server assigns it from the properties.
        """
        _, properties = _read_draft(user)
        body = UserRecord(properties=properties).to_dict()
        options = self._entity_options(opts, body=body)
        logger.debug(f"[UserDirectoryClient.create] properties={list(properties.keys())}")
        res = await self._gateway.request(USER_PATH).post(options)
        return UserRecord.from_dict(res, directory=self)

    async def update(self, user: UserLike, opts: OptionsLike = None) -> UserRecord:
        """
        PUT user/{id} with {"entity-type": "user", "id": ..., "properties": ...}.

        The server replaces the properties it is sent, so fetch the existing
        record first and change it rather than building one from scratch.
        """
        user_id, properties = _read_draft(user)
        _require_identifier(user_id, "id", "update")
        body = UserRecord(id=user_id, properties=properties).to_dict()
        options = self._entity_options(opts, body=body)
        path = join(USER_PATH, user_id)
        logger.debug(f"[UserDirectoryClient.update] id={user_id}, properties={list(properties.keys())}")
        res = await self._gateway.request(path).put(options)
        return UserRecord.from_dict(res, directory=self)

    async def delete(self, username: str, opts: OptionsLike = None) -> Any:
        """DELETE user/{username}. Returns the gateway result untouched."""
        _require_identifier(username, "username", "delete")
        options = self.compute_options(opts)
        path = join(USER_PATH, username)
        logger.debug(f"[UserDirectoryClient.delete] username={username}")
        return await self._gateway.request(path).delete(options)

    def compute_options(self, opts: OptionsLike = None) -> RequestOptions:
        """Per-call options merged onto this client's defaults."""
        return self.defaults.merge(opts)

    def _entity_options(self, opts: OptionsLike, body: Any = None) -> RequestOptions:
        # Results are turned into UserRecord, so the parsed body is always needed
        options = replace(self.compute_options(opts), resolve_with_full_response=False)
        if body is not None:
            options = options.with_body(body)
        return options


def _read_draft(user: UserLike) -> Tuple[Optional[str], Mapping[str, Any]]:
    if isinstance(user, UserRecord):
        return user.id, user.properties
    if isinstance(user, Mapping):
        return user.get("id"), user.get("properties") or {}
    raise InvalidArgumentError(f"Expected a UserRecord or mapping, got {type(user).__name__}")


def _require_identifier(value: Optional[str], name: str, operation: str):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(f"{operation} requires a non-empty user {name}, got {value!r}")
