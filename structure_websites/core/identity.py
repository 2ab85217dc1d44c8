# structure_websites/core/identity.py
from __future__ import annotations

from typing import Any, Mapping

from bson import ObjectId
from bson.errors import InvalidId

from structure_websites.errors import InvalidIdentityError

ID_FIELD = "_id"


def parse_object_id(value: str, *, operation: str = "") -> ObjectId:
    """Parse a 24-char hex string into an ObjectId or raise InvalidIdentityError."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentityError(f"invalid id format {value!r}: {e}", operation=operation, value=value) from e


def resolve_identity(doc: Mapping[str, Any], *, operation: str = "") -> ObjectId:
    """
    Resolve the canonical identity of an incoming document once, at the boundary.

    - no `_id`                      -> freshly generated ObjectId
    - str (trimmed), empty          -> freshly generated ObjectId
    - str (trimmed), non-empty      -> must parse as ObjectId
    - {"$oid": "<hex>"}             -> parsed like a string (extended JSON)
    - ObjectId                      -> used unchanged
    - anything else                 -> InvalidIdentityError
    """
    if ID_FIELD not in doc:
        return ObjectId()

    raw = doc[ID_FIELD]
    if isinstance(raw, ObjectId):
        return raw
    if isinstance(raw, Mapping) and set(raw.keys()) == {"$oid"}:
        raw = raw["$oid"]
    if isinstance(raw, str):
        value = raw.strip()
        if not value:
            return ObjectId()
        try:
            return ObjectId(value)
        except InvalidId as e:
            raise InvalidIdentityError(f"invalid _id value {value!r}: {e}", operation=operation, value=value) from e

    raise InvalidIdentityError(
        f"_id must be a hex string or ObjectId, got {type(raw).__name__}",
        operation=operation,
        value=raw,
    )
