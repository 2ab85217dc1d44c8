# structure_websites/db/mongodb.py
from __future__ import annotations

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from structure_websites.config import settings

logger = logging.getLogger("structure_websites.db")

_client: Optional[AsyncIOMotorClient] = None

TEMPLATES_COLLECTION = "structure_templates"
CLIENTS_COLLECTION = "db_clients"


def get_client() -> AsyncIOMotorClient:
    """
    Singleton Motor client shared by the core registry and every tenant database.
    """
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(settings.mongo_uri)
    return _client


def get_core_db() -> AsyncIOMotorDatabase:
    """
    Shared administrative database (template registry + client registry).
    """
    return get_client()[settings.core_db_name]


def get_tenant_db(tenant: str) -> AsyncIOMotorDatabase:
    """
    Each tenant owns a database named after it.
    """
    return get_client()[tenant]


async def init_indexes() -> None:
    db = get_core_db()

    # structure_templates
    await db[TEMPLATES_COLLECTION].create_index(
        [("template_key", ASCENDING)], name="uk_template_key", unique=True
    )

    # db_clients: both flag fields are queried by the fan-out
    await db[CLIENTS_COLLECTION].create_index(
        [(settings.default_target_field, ASCENDING)], name="ix_target_field"
    )
    await db[CLIENTS_COLLECTION].create_index(
        [(settings.legacy_target_field, ASCENDING)], name="ix_legacy_target_field"
    )
    logger.info("Mongo indexes ensured (db=%s)", settings.core_db_name)


async def ping() -> bool:
    res = await get_client().admin.command("ping")
    return bool(res.get("ok"))


async def close_client() -> None:
    """
    Graceful shutdown hook (called from app lifespan).
    """
    global _client
    if _client is not None:
        _client.close()
        _client = None
