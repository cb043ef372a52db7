"""
Request Options

Per-call configuration merged onto component defaults before a request
is handed to the gateway.
"""
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Mapping, Optional, Union

from atrium.modules.exceptions import InvalidArgumentError

# Fields merged key by key instead of replaced wholesale
_MERGED_FIELDS = ("headers", "query_params", "enrichers", "fetch_properties")


@dataclass(frozen=True)
class RequestOptions:
    """Options recognized by the request gateway. Every field is optional."""
    body: Any = None  # JSON payload for writes
    headers: Optional[Dict[str, str]] = None
    query_params: Optional[Dict[str, Any]] = None
    timeout: Optional[float] = None  # seconds, client side
    repository_name: Optional[str] = None
    schemas: Optional[List[str]] = None
    enrichers: Optional[Dict[str, List[str]]] = None  # entity-type -> enricher names
    fetch_properties: Optional[Dict[str, List[str]]] = None  # entity-type -> property names
    depth: Optional[str] = None
    transaction_timeout: Optional[int] = None  # seconds, server side
    resolve_with_full_response: Optional[bool] = None

    @classmethod
    def coerce(cls, value: Union["RequestOptions", Mapping[str, Any], None]) -> "RequestOptions":
        """Accept None, a RequestOptions, or a mapping keyed by field name."""
        if value is None:
            return cls()
        if isinstance(value, RequestOptions):
            return value
        if isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = sorted(set(value) - known)
            if unknown:
                raise InvalidArgumentError(f"Unknown request option(s): {', '.join(unknown)}")
            return cls(**value)
        raise InvalidArgumentError(f"Expected RequestOptions or mapping, got {type(value).__name__}")

    def merge(self, overrides: Union["RequestOptions", Mapping[str, Any], None]) -> "RequestOptions":
        """Return a new RequestOptions with overrides applied on top of self."""
        other = RequestOptions.coerce(overrides)
        merged = {}
        for f in fields(self):
            mine = getattr(self, f.name)
            theirs = getattr(other, f.name)
            if f.name in _MERGED_FIELDS:
                merged[f.name] = _merge_dicts(mine, theirs)
            else:
                merged[f.name] = theirs if theirs is not None else mine
        return RequestOptions(**merged)

    def with_body(self, body: Any) -> "RequestOptions":
        return replace(self, body=body)


def _merge_dicts(base: Optional[Dict], override: Optional[Dict]) -> Optional[Dict]:
    if base is None and override is None:
        return None
    result = dict(base or {})
    result.update(override or {})
    return result
