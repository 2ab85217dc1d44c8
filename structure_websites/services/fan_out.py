# structure_websites/services/fan_out.py
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from structure_websites.core.identity import ID_FIELD
from structure_websites.dal.structure_websites_dal import StructureWebsitesDAL
from structure_websites.errors import FanOutCancelledError, FanOutError
from structure_websites.models import ReconcileResult

logger = logging.getLogger("structure_websites.services.fan_out")

TenantDbFactory = Callable[[str], AsyncIOMotorDatabase]
CancelProbe = Callable[[], Awaitable[bool]]


class FanOutReconciler:
    """
    Converge every tenant's 'structure_websites' collection onto a template document set.

    Per tenant, in order: replace-upsert every template document, then delete every
    document whose `_id` is outside the template. Tenants run strictly one after
    another; the first failure stops the fan-out and earlier tenants keep their writes.
    """

    def __init__(self, tenant_db: TenantDbFactory, *, cancelled: Optional[CancelProbe] = None) -> None:
        self.tenant_db = tenant_db
        self.cancelled = cancelled

    async def reconcile(self, tenant_names: List[str], documents: List[Dict[str, Any]]) -> ReconcileResult:
        template_ids = [d[ID_FIELD] for d in documents]
        result = ReconcileResult()

        for idx, tenant in enumerate(tenant_names):
            if self.cancelled is not None and await self.cancelled():
                logger.warning("[templates] fan-out cancelled before client %s", tenant)
                raise FanOutCancelledError(processed=result.tenants, remaining=tenant_names[idx:])

            try:
                dal = StructureWebsitesDAL(self.tenant_db(tenant))
            except PyMongoError as e:
                logger.error("[templates] client %s: cannot open database: %s", tenant, e)
                raise FanOutError(tenant=tenant, phase="open client database", cause=e, processed=result.tenants) from e

            for doc in documents:
                try:
                    await dal.replace(doc)
                except PyMongoError as e:
                    logger.error("[templates] client %s: upsert of %s failed: %s", tenant, doc[ID_FIELD], e)
                    raise FanOutError(tenant=tenant, phase="upsert document", cause=e, processed=result.tenants) from e
                result.updated_count += 1

            try:
                deleted = await dal.delete_except(template_ids)
            except PyMongoError as e:
                logger.error("[templates] client %s: delete of outdated documents failed: %s", tenant, e)
                raise FanOutError(
                    tenant=tenant, phase="delete outdated documents", cause=e, processed=result.tenants
                ) from e

            result.deleted_count += deleted
            result.tenants.append(tenant)
            logger.info(
                "[templates] client %s converged: upserted=%d deleted=%d",
                tenant,
                len(documents),
                deleted,
            )

        return result
