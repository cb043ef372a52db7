"""
User Domain Model

One directory user as returned by the platform. The properties schema
belongs to the server; this model only carries it.
"""
import copy
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from atrium.modules.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from atrium.modules.users.services.user_directory import UserDirectoryClient

USER_ENTITY_TYPE = "user"


@dataclass(frozen=True)
class UserRecord:
    """User value object. Changes go through set() (new draft) and save() (new record from the server)."""
    id: Optional[str] = None
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)
    entity_type: str = USER_ENTITY_TYPE
    raw: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)
    # Directory that produced this record; not owned
    directory: Optional["UserDirectoryClient"] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "properties", _freeze(self.properties or {}))

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        directory: Optional["UserDirectoryClient"] = None
    ) -> "UserRecord":
        """Create UserRecord from a response body (or a caller-supplied draft mapping)."""
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(f"Expected a user mapping, got {type(data).__name__}")
        return cls(
            id=data.get("id"),
            properties=data.get("properties") or {},
            entity_type=data.get("entity-type", USER_ENTITY_TYPE),
            raw=copy.deepcopy(dict(data)),
            directory=directory,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire payload for create/update."""
        payload: Dict[str, Any] = {"entity-type": USER_ENTITY_TYPE}
        if self.id:
            payload["id"] = self.id
        payload["properties"] = _thaw(self.properties)
        return payload

    def get(self, name: str, default: Any = None) -> Any:
        return self.properties.get(name, default)

    def set(self, properties: Optional[Mapping[str, Any]] = None, **changes: Any) -> "UserRecord":
        """Return a new draft with the given properties merged in. Nothing is sent."""
        merged = dict(self.properties)
        merged.update(properties or {})
        merged.update(changes)
        return replace(self, properties=merged)

    async def save(self, opts=None) -> "UserRecord":
        """PUT this record through the directory that produced it."""
        return await self._require_directory("save").update(self, opts)

    async def delete(self, opts=None) -> Any:
        return await self._require_directory("delete").delete(self.id, opts)

    def _require_directory(self, operation: str) -> "UserDirectoryClient":
        if self.directory is None:
            raise InvalidArgumentError(
                f"Cannot {operation} user {self.id!r}: record is not attached to a UserDirectoryClient"
            )
        return self.directory


def _freeze(value: Any) -> Any:
    """Read-only copy of a JSON value: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    """Inverse of _freeze, producing plain JSON-serializable containers."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (tuple, frozenset)):
        return [_thaw(item) for item in value]
    return value
