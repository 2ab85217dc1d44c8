# structure_websites/dal/google_reviews_dal.py
from __future__ import annotations

from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase

COLLECTION = "google_reviews"


class GoogleReviewsDAL:
    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db[COLLECTION]

    async def list_all(self) -> List[Dict[str, Any]]:
        return [d async for d in self.col.find({})]
