# structure_websites/routers/health_router.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from pymongo.errors import PyMongoError

from structure_websites.config import settings
from structure_websites.db.mongodb import ping

logger = logging.getLogger("structure_websites.api.health")

router = APIRouter(tags=["meta"])


@router.get("/health", summary="Liveness probe")
def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "service": settings.service_name,
        "at": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/ready", summary="Readiness probe")
async def ready() -> Dict[str, Any]:
    """
    Readiness probe: Mongo must answer a ping.
    """
    try:
        await ping()
    except PyMongoError as e:
        logger.warning("Mongo ping failed: %s", e)
        raise HTTPException(status_code=503, detail="mongo unavailable")
    return {
        "status": "ready",
        "service": settings.service_name,
        "db": settings.core_db_name,
        "at": datetime.now(timezone.utc).isoformat(),
    }
