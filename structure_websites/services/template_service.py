# structure_websites/services/template_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from structure_websites.core.identity import ID_FIELD, resolve_identity
from structure_websites.core.template_values import sanitize_document
from structure_websites.dal.client_registry_dal import ClientRegistryDAL
from structure_websites.dal.template_dal import TemplateDAL
from structure_websites.errors import InputValidationError, InvalidIdentityError, StorageError
from structure_websites.models import ApplyTemplateResult
from structure_websites.services.fan_out import CancelProbe, FanOutReconciler, TenantDbFactory

logger = logging.getLogger("structure_websites.services.templates")

OPERATION = "apply_template"


def prepare_template_documents(documents: Sequence[Optional[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """
    Resolve identities and erase values. `None` entries are skipped; an invalid
    `_id` rejects the whole batch, naming the offending position.
    """
    skeletons: List[Dict[str, Any]] = []
    for idx, raw in enumerate(documents):
        if raw is None:
            continue
        try:
            doc_id = resolve_identity(raw, operation=OPERATION)
        except InvalidIdentityError as e:
            raise InvalidIdentityError(f"document {idx}: {e}", operation=OPERATION, value=e.value) from e

        skeleton = sanitize_document({k: v for k, v in raw.items() if k != ID_FIELD})
        skeleton[ID_FIELD] = doc_id
        skeletons.append(skeleton)
    return skeletons


class TemplateService:
    def __init__(
        self,
        core_db: AsyncIOMotorDatabase,
        tenant_db: TenantDbFactory,
        *,
        default_field: str = "structure_template",
        legacy_field: str = "template",
    ) -> None:
        self.templates = TemplateDAL(core_db)
        self.clients = ClientRegistryDAL(core_db, default_field=default_field, legacy_field=legacy_field)
        self.tenant_db = tenant_db
        self.default_field = default_field

    async def apply_template(
        self,
        template_key: str,
        documents: Sequence[Optional[Dict[str, Any]]],
        target_field: Optional[str] = None,
        *,
        cancelled: Optional[CancelProbe] = None,
    ) -> ApplyTemplateResult:
        template_key = (template_key or "").strip()
        if not template_key:
            raise InputValidationError("template_key is required", operation=OPERATION)
        if not documents:
            raise InputValidationError("documents payload cannot be empty", operation=OPERATION)

        skeletons = prepare_template_documents(documents)
        if not skeletons:
            raise InputValidationError("no usable documents after sanitizing input", operation=OPERATION)

        field = (target_field or "").strip() or self.default_field

        try:
            await self.templates.upsert(template_key, skeletons)
        except PyMongoError as e:
            logger.exception("[templates] failed to upsert template definition %s", template_key)
            raise StorageError(f"failed to upsert template definition: {e}", operation=OPERATION, cause=e) from e

        try:
            tenants, effective_field = await self.clients.resolve_tenants(template_key, field)
        except PyMongoError as e:
            logger.exception("[templates] failed to query clients for template %s", template_key)
            raise StorageError(
                f"failed to query clients for template {template_key!r}: {e}", operation=OPERATION, cause=e
            ) from e

        logger.info(
            "[templates] applying %s (%d document(s)) to %d client(s) via %s",
            template_key,
            len(skeletons),
            len(tenants),
            effective_field,
        )

        reconciler = FanOutReconciler(self.tenant_db, cancelled=cancelled)
        outcome = await reconciler.reconcile(tenants, skeletons)

        message = (
            f"Template {template_key} applied via field {effective_field} to {len(outcome.tenants)} client(s); "
            f"updated {outcome.updated_count} document(s), deleted {outcome.deleted_count} document(s)"
        )
        logger.info("[templates] %s", message)

        return ApplyTemplateResult(
            template_key=template_key,
            target_field=effective_field,
            affected_clients=sorted(outcome.tenants),
            updated_documents=outcome.updated_count,
            deleted_documents=outcome.deleted_count,
            message=message,
        )
