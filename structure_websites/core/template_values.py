# structure_websites/core/template_values.py
"""
Structural typing by example.

A template skeleton keeps the *shape* of a document and erases its values:

    {"title": "Home", "visible": True, "blocks": [{"h": 1}, {"h": 2, "w": 3}]}
        -> {"title": "", "visible": False, "blocks": [{"h": 0, "w": 0}]}

Document trees are plain BSON/JSON values: dict | list | str | bool | number | None
(plus the odd BSON scalar). Every function here returns fresh containers and
never mutates its arguments.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from bson.decimal128 import Decimal128
from bson.int64 import Int64

_NUMERIC = (int, float, Decimal, Decimal128, Int64)


def sanitize_document(doc: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return the skeleton of a top-level document (None stays None)."""
    if doc is None:
        return None
    skeleton = build_skeleton(doc)
    return skeleton if isinstance(skeleton, dict) else {}


def build_skeleton(value: Any) -> Any:
    if isinstance(value, Mapping):
        result: Dict[str, Any] = {}
        for key, raw in value.items():
            result[key] = merge_skeletons(result.get(key), build_skeleton(raw))
        return result
    if isinstance(value, (list, tuple)):
        element: Any = None
        for item in value:
            element = merge_skeletons(element, build_skeleton(item))
        return [] if element is None else [element]
    if value is None or isinstance(value, str):
        return ""
    # bool before numbers: bool is an int subclass
    if isinstance(value, bool):
        return False
    if isinstance(value, _NUMERIC):
        return 0
    return ""


def merge_skeletons(base: Any, incoming: Any) -> Any:
    """
    Fold two skeleton values into one.

    Objects union their keys recursively, arrays fold down to a single
    representative built from both first elements, and a scalar on the base
    side always wins: the first-seen shape is authoritative.
    """
    if base is None:
        return copy_tree(incoming)
    if incoming is None:
        return base

    if isinstance(base, dict):
        merged = dict(base)
        for key, val in _as_object(incoming).items():
            merged[key] = merge_skeletons(merged.get(key), val)
        return merged

    if isinstance(base, list):
        incoming_items = _as_array(incoming)
        if not base and not incoming_items:
            return []
        base_elem = base[0] if base else None
        incoming_elem = incoming_items[0] if incoming_items else None
        folded = merge_skeletons(base_elem, incoming_elem)
        return [] if folded is None else [folded]

    return base


def copy_tree(value: Any) -> Any:
    """Deep copy of dict/list containers; scalars are shared."""
    if isinstance(value, Mapping):
        return {key: copy_tree(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [copy_tree(item) for item in value]
    return value


def _as_object(value: Any) -> Dict[str, Any]:
    if isinstance(value, dict):
        return value
    if isinstance(value, list) and value and isinstance(value[0], dict):
        return value[0]
    return {}


def _as_array(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return [value]
    return [copy_tree(value)]
