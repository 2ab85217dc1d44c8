# structure_websites/models/fields.py
"""
Lenient field types for mapping loosely-typed Mongo documents into response models.
A value of the wrong BSON type degrades to the field's empty value instead of failing.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

from bson import ObjectId
from pydantic import BeforeValidator
from typing_extensions import Annotated


def _str_or_empty(v: Any) -> str:
    return v if isinstance(v, str) else ""


def _str_or_none(v: Any) -> Optional[str]:
    return v if isinstance(v, str) and v != "" else None


def _int_or_zero(v: Any) -> int:
    if isinstance(v, bool):
        return 0
    if isinstance(v, (int, float)):
        return int(v)
    return 0


def _int_or_none(v: Any) -> Optional[int]:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    return int(v)


def _float_or_none(v: Any) -> Optional[float]:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    return float(v)


def _bool_or_false(v: Any) -> bool:
    return v if isinstance(v, bool) else False


def _bool_or_none(v: Any) -> Optional[bool]:
    return v if isinstance(v, bool) else None


def _str_list(v: Any) -> List[str]:
    if not isinstance(v, (list, tuple)):
        return []
    return [s for s in v if isinstance(s, str)]


def _object_id_hex(v: Any) -> str:
    if isinstance(v, ObjectId):
        return str(v)
    return v if isinstance(v, str) else ""


def _timestamp(v: Any) -> Optional[str]:
    if isinstance(v, datetime):
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{v.microsecond // 1000:03d}Z"
    return v if isinstance(v, str) else None


Str = Annotated[str, BeforeValidator(_str_or_empty)]
OptStr = Annotated[Optional[str], BeforeValidator(_str_or_none)]
Int = Annotated[int, BeforeValidator(_int_or_zero)]
OptInt = Annotated[Optional[int], BeforeValidator(_int_or_none)]
OptFloat = Annotated[Optional[float], BeforeValidator(_float_or_none)]
Bool = Annotated[bool, BeforeValidator(_bool_or_false)]
OptBool = Annotated[Optional[bool], BeforeValidator(_bool_or_none)]
StrList = Annotated[List[str], BeforeValidator(_str_list)]
IdHex = Annotated[str, BeforeValidator(_object_id_hex)]
Timestamp = Annotated[Optional[str], BeforeValidator(_timestamp)]
