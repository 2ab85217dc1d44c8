# structure_websites/dal/seo_dal.py
from __future__ import annotations

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

SEO_COLLECTION = "structure_seo"
PLUGINS_COLLECTION = "plugins"
SEO_PLUGIN = "structure_seo"


class SeoDAL:
    """
    Per-tenant SEO pages ('structure_seo', keyed by pageKey) and the SEO plugin
    record in 'plugins' (keyed by short_name).
    """

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.pages = db[SEO_COLLECTION]
        self.plugins = db[PLUGINS_COLLECTION]

    async def get_page(self, page_key: str) -> Optional[Dict[str, Any]]:
        return await self.pages.find_one({"pageKey": page_key})

    async def get_plugin_config(self, short_name: str = SEO_PLUGIN) -> Optional[Dict[str, Any]]:
        return await self.plugins.find_one({"short_name": short_name})

    async def set_plugin_config(self, config: Dict[str, Any], short_name: str = SEO_PLUGIN) -> Optional[Dict[str, Any]]:
        return await self.plugins.find_one_and_update(
            {"short_name": short_name},
            {"$set": {"config": config}},
            return_document=ReturnDocument.AFTER,
        )
