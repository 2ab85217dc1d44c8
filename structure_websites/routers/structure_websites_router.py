# structure_websites/routers/structure_websites_router.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from structure_websites.config import Settings
from structure_websites.core.bson_json import document_to_json
from structure_websites.dependencies import (
    core_db,
    get_settings,
    require_platform_role,
    tenant_db,
    tenant_db_factory,
)
from structure_websites.models import ApplyTemplateRequest, ApplyTemplateResult
from structure_websites.services.structure_websites_service import StructureWebsitesService
from structure_websites.services.template_service import TemplateService

router = APIRouter(prefix="/structure-websites", tags=["structure-websites"])
logger = logging.getLogger("structure_websites.api.structure_websites")


@router.get("", response_model=List[Dict[str, Any]])
async def list_documents(db: AsyncIOMotorDatabase = Depends(tenant_db)):
    svc = StructureWebsitesService(db)
    return [document_to_json(d) for d in await svc.list_documents()]


@router.put("/{doc_id}", response_model=Dict[str, Any])
async def replace_document(
    doc_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncIOMotorDatabase = Depends(tenant_db),
    settings: Settings = Depends(get_settings),
):
    """
    Merge the payload into the stored document and replace it (LOCAL_DEVELOPMENT only).
    """
    svc = StructureWebsitesService(db, local_development=settings.local_development)
    doc = await svc.replace_document(doc_id, payload)
    return document_to_json(doc)


@router.post(
    "/templates/apply",
    response_model=ApplyTemplateResult,
    dependencies=[Depends(require_platform_role)],
)
async def apply_template(
    body: ApplyTemplateRequest,
    request: Request,
    core: AsyncIOMotorDatabase = Depends(core_db),
    tenant_db_for=Depends(tenant_db_factory),
    settings: Settings = Depends(get_settings),
) -> ApplyTemplateResult:
    """
    Store the template skeletons in the core registry and converge every
    subscribed client's structure_websites collection onto them.
    """
    logger.info("[templates] apply requested for %s", body.template_key)
    svc = TemplateService(
        core,
        tenant_db_for,
        default_field=settings.default_target_field,
        legacy_field=settings.legacy_target_field,
    )
    return await svc.apply_template(
        body.template_key,
        body.documents,
        body.target_field,
        cancelled=request.is_disconnected,
    )
