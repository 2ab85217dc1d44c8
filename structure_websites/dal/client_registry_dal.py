# structure_websites/dal/client_registry_dal.py
from __future__ import annotations

import logging
from typing import List, Tuple

from motor.motor_asyncio import AsyncIOMotorDatabase

from structure_websites.db.mongodb import CLIENTS_COLLECTION

logger = logging.getLogger("structure_websites.dal.clients")


class ClientRegistryDAL:
    """
    Read side of the shared client registry ('db_clients').
    A client subscribes to a template when one of its flag fields equals the template key.
    """

    def __init__(
        self,
        core_db: AsyncIOMotorDatabase,
        *,
        default_field: str = "structure_template",
        legacy_field: str = "template",
    ) -> None:
        self.col = core_db[CLIENTS_COLLECTION]
        self.default_field = default_field
        self.legacy_field = legacy_field

    async def count_subscribers(self, field: str, template_key: str) -> int:
        return await self.col.count_documents({field: template_key})

    async def list_client_names(self, field: str, template_key: str) -> List[str]:
        cursor = self.col.find({field: template_key}, {"client_name": 1, "_id": 0})
        names = set()
        async for doc in cursor:
            name = doc.get("client_name")
            if not isinstance(name, str):
                continue
            name = name.strip()
            if name:
                names.add(name)
        return sorted(names)

    async def resolve_tenants(self, template_key: str, target_field: str) -> Tuple[List[str], str]:
        """
        Returns (sorted client names, effective field).

        The legacy field is consulted only when the caller stayed on the default
        field and that field matches no client at all. An explicit override is final.
        """
        effective_field = target_field
        if target_field == self.default_field:
            count = await self.count_subscribers(target_field, template_key)
            if count == 0:
                effective_field = self.legacy_field
                logger.info(
                    "[templates] no clients on %s=%s; falling back to %s",
                    target_field,
                    template_key,
                    effective_field,
                )

        names = await self.list_client_names(effective_field, template_key)
        return names, effective_field
