# structure_websites/routers/seo_router.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from structure_websites.config import Settings
from structure_websites.dependencies import get_settings, tenant_db
from structure_websites.models import SeoConfig, SeoPage
from structure_websites.services.seo_service import SeoService

router = APIRouter(tags=["seo"])


@router.get("/seo/{page_key:path}", response_model=SeoPage)
async def get_seo(page_key: str, db: AsyncIOMotorDatabase = Depends(tenant_db)):
    page = await SeoService(db).page(page_key)
    if not page:
        raise HTTPException(status_code=404, detail="SEO page not found")
    return page


@router.get("/seo-config", response_model=SeoConfig)
async def get_seo_config(db: AsyncIOMotorDatabase = Depends(tenant_db)):
    return await SeoService(db).config()


@router.get("/seo-config/full", response_model=Dict[str, Any])
async def get_seo_config_full(
    db: AsyncIOMotorDatabase = Depends(tenant_db),
    settings: Settings = Depends(get_settings),
):
    return await SeoService(db, local_development=settings.local_development).config_full()


@router.put("/seo-config", response_model=Dict[str, Any])
async def update_seo_config(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncIOMotorDatabase = Depends(tenant_db),
    settings: Settings = Depends(get_settings),
):
    return await SeoService(db, local_development=settings.local_development).update_config(payload)
