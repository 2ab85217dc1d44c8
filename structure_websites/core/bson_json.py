# structure_websites/core/bson_json.py
from __future__ import annotations

import base64
from datetime import datetime
from typing import Any, Dict, Mapping

from bson import ObjectId
from bson.binary import Binary
from bson.decimal128 import Decimal128


def to_jsonable(value: Any) -> Any:
    """Convert a BSON value tree into plain JSON-safe Python values."""
    if isinstance(value, Mapping):
        return {str(key): to_jsonable(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal128):
        return float(value.to_decimal())
    if isinstance(value, (bytes, Binary)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    return str(value)


def document_to_json(doc: Mapping[str, Any]) -> Dict[str, Any]:
    return to_jsonable(doc)
