# structure_websites/services/seo_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from structure_websites.core.bson_json import document_to_json, to_jsonable
from structure_websites.dal.seo_dal import SeoDAL
from structure_websites.errors import GuardViolationError, NotFoundError, StorageError
from structure_websites.models import (
    AlternateLanguage,
    DublinCoreMeta,
    FacebookMeta,
    LinkedInMeta,
    OpenGraphMeta,
    SeoConfig,
    SeoPage,
    TwitterCardMeta,
)

logger = logging.getLogger("structure_websites.services.seo")


def _obj(doc: Mapping[str, Any], key: str) -> Optional[Dict[str, Any]]:
    value = doc.get(key)
    return value if isinstance(value, dict) else None


def to_seo_page(doc: Mapping[str, Any]) -> SeoPage:
    page_key = doc.get("pageKey") if isinstance(doc.get("pageKey"), str) else ""
    page = doc.get("page") if isinstance(doc.get("page"), str) else ""

    og = _obj(doc, "openGraph")
    tc = _obj(doc, "twitterCard")
    fb = _obj(doc, "facebook")
    li = _obj(doc, "linkedIn")
    dc = _obj(doc, "dublinCore")
    sd = _obj(doc, "structuredData")
    al = doc.get("alternateLanguages")

    return SeoPage.model_validate(
        {
            **doc,
            "page": page or page_key or "/",
            "open_graph": OpenGraphMeta.model_validate(og) if og is not None else OpenGraphMeta(og_type="website"),
            "twitter_card": (
                TwitterCardMeta.model_validate(tc) if tc is not None else TwitterCardMeta(twitter_card="summary")
            ),
            "facebook": FacebookMeta.model_validate(fb) if fb is not None else None,
            "linked_in": LinkedInMeta.model_validate(li) if li is not None else None,
            "dublin_core": DublinCoreMeta.model_validate(dc) if dc is not None else DublinCoreMeta(),
            "structured_data": to_jsonable(sd) if sd is not None else None,
            "alternate_languages": (
                [AlternateLanguage.model_validate(item) for item in al if isinstance(item, dict)]
                if isinstance(al, list)
                else None
            ),
        }
    )


def to_seo_config(doc: Mapping[str, Any]) -> SeoConfig:
    config = _obj(doc, "config") or {}
    local_business = _obj(config, "localBusiness")
    return SeoConfig.model_validate(
        {
            **doc,
            "favicon_url": config.get("faviconUrl"),
            "default_locale": config.get("defaultLocale"),
            "cookie_consent_required": config.get("cookieConsentRequired"),
            "robots_url": config.get("robotsUrl"),
            "webmanifest": config.get("webmanifest"),
            "local_business": to_jsonable(local_business) if local_business is not None else None,
        }
    )


class SeoService:
    def __init__(self, db: AsyncIOMotorDatabase, *, local_development: bool = False) -> None:
        self.dal = SeoDAL(db)
        self.local_development = local_development

    def _guard(self, operation: str, message: str) -> None:
        if not self.local_development:
            raise GuardViolationError(message, operation=operation)

    async def _load_config(self, operation: str) -> Dict[str, Any]:
        try:
            doc = await self.dal.get_plugin_config()
        except PyMongoError as e:
            logger.exception("[seo] failed to fetch SEO config")
            raise StorageError(f"fetch SEO config error: {e}", operation=operation, cause=e) from e
        if not doc:
            raise NotFoundError("SEO plugin configuration not found", operation=operation)
        return doc

    async def page(self, page_key: str) -> Optional[SeoPage]:
        try:
            doc = await self.dal.get_page(page_key)
        except PyMongoError as e:
            logger.exception("[seo] failed to fetch SEO page %s", page_key)
            raise StorageError(f"fetch SEO error: {e}", operation="seo", cause=e) from e
        return to_seo_page(doc) if doc else None

    async def config(self) -> SeoConfig:
        return to_seo_config(await self._load_config("seo_config"))

    async def config_full(self) -> Dict[str, Any]:
        self._guard("seo_config_full", "full SEO config is available only when LOCAL_DEVELOPMENT=true")
        return document_to_json(await self._load_config("seo_config_full"))

    async def update_config(self, payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        op = "update_seo_config"
        self._guard(op, "configuration updates allowed only when LOCAL_DEVELOPMENT=true")

        if payload is None:
            return document_to_json(await self._load_config(op))

        try:
            doc = await self.dal.set_plugin_config(payload)
        except PyMongoError as e:
            logger.exception("[seo] failed to update SEO config")
            raise StorageError(f"failed to update SEO config: {e}", operation=op, cause=e) from e
        if not doc:
            raise NotFoundError("SEO plugin configuration not found", operation=op)

        logger.info("[seo] SEO config updated (%d top-level key(s))", len(payload))
        return document_to_json(doc)
