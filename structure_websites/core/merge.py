# structure_websites/core/merge.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from structure_websites.core.identity import ID_FIELD
from structure_websites.core.template_values import copy_tree


def merge_payload(existing: Optional[Mapping[str, Any]], update: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge a partial update into a stored document.

    Objects on both sides merge recursively; any other incoming value replaces
    the stored one outright. `_id` keys in the update are skipped at every
    depth, so identities always come from `existing`.
    """
    merged = _merge(copy_tree(dict(existing or {})), update)
    if existing is not None and ID_FIELD in existing:
        merged[ID_FIELD] = existing[ID_FIELD]
    return merged


def _merge(base: Dict[str, Any], update: Mapping[str, Any]) -> Dict[str, Any]:
    for key, value in update.items():
        if key == ID_FIELD:
            continue
        if isinstance(value, Mapping):
            current = base.get(key)
            base[key] = _merge(current if isinstance(current, dict) else {}, value)
            continue
        base[key] = copy_tree(value)
    return base
