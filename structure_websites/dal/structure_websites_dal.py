# structure_websites/dal/structure_websites_dal.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.results import UpdateResult

from structure_websites.core.template_values import copy_tree

COLLECTION = "structure_websites"


class StructureWebsitesDAL:
    """
    Layout documents of a single tenant, keyed by `_id`.
    Collection: 'structure_websites'
    """

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db[COLLECTION]

    async def list_all(self) -> List[Dict[str, Any]]:
        return [d async for d in self.col.find({})]

    async def get(self, doc_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.col.find_one({"_id": doc_id})

    async def replace(self, doc: Dict[str, Any]) -> UpdateResult:
        """Full replace by `_id`, inserting when absent."""
        return await self.col.replace_one({"_id": doc["_id"]}, copy_tree(doc), upsert=True)

    async def delete_except(self, keep_ids: List[ObjectId]) -> int:
        res = await self.col.delete_many({"_id": {"$nin": list(keep_ids)}})
        return res.deleted_count
