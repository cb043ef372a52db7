"""
Path helpers for building resource paths relative to the REST API root.
"""
from urllib.parse import quote

from atrium.modules.exceptions import InvalidArgumentError


def join(*segments: str) -> str:
    """
    Join path segments with a single '/'.

    The first segment is the fixed resource name and is kept as-is (minus
    surrounding slashes). Following segments are escaped so each one stays
    a single path segment, e.g. join("user", "jdoe/admin") -> "user/jdoe%2Fadmin".
    """
    if not segments:
        return ""
    if any(segment is None for segment in segments):
        raise InvalidArgumentError(f"Cannot join a None path segment: {segments!r}")

    head, *rest = segments
    parts = [str(head).strip("/")]
    parts.extend(quote(str(segment), safe="") for segment in rest)
    return "/".join(parts)
