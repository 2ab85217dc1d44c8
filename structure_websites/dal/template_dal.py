# structure_websites/dal/template_dal.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from structure_websites.core.template_values import copy_tree
from structure_websites.db.mongodb import TEMPLATES_COLLECTION


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TemplateDAL:
    """
    Registry of named structure templates in the core database.
    Collection: 'structure_templates' (unique on template_key)
    """

    def __init__(self, core_db: AsyncIOMotorDatabase) -> None:
        self.col = core_db[TEMPLATES_COLLECTION]

    async def upsert(self, template_key: str, documents: List[Dict[str, Any]]) -> None:
        # overwrite, never version
        await self.col.update_one(
            {"template_key": template_key},
            {
                "$set": {
                    "template_key": template_key,
                    "documents": [copy_tree(d) for d in documents],
                    "updated_at": _utcnow(),
                }
            },
            upsert=True,
        )

    async def get(self, template_key: str) -> Optional[Dict[str, Any]]:
        return await self.col.find_one({"template_key": template_key})
