# structure_websites/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from structure_websites.config import settings
from structure_websites.db.mongodb import close_client, init_indexes
from structure_websites.errors import StructureWebsitesError
from structure_websites.infra.logging import setup_logging
from structure_websites.routers import (
    google_reviews_router,
    health_router,
    seo_router,
    structure_websites_router,
)

logger = logging.getLogger("structure_websites.main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    App lifespan:
      - configure logging
      - init Mongo indexes on the core registry
      - graceful shutdown: Mongo client
    """
    setup_logging(settings.service_name, settings.log_level)
    logger.info("%s starting up (local_development=%s)", settings.service_name, settings.local_development)

    await init_indexes()

    try:
        yield
    finally:
        try:
            await close_client()
            logger.info("Mongo client closed")
        except Exception:
            logger.warning("Error closing Mongo client", exc_info=True)

        logger.info("%s shutdown complete", settings.service_name)


def create_app(*, with_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        title="Structure Websites Service",
        description="Per-tenant website structure, SEO and review data with template fan-out",
        version="0.1.0",
        default_response_class=ORJSONResponse,
        lifespan=lifespan if with_lifespan else None,
    )

    @app.exception_handler(StructureWebsitesError)
    async def _structure_error(request: Request, exc: StructureWebsitesError) -> ORJSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return ORJSONResponse(status_code=exc.status_code, content=exc.to_detail())

    app.include_router(health_router)
    app.include_router(structure_websites_router)
    app.include_router(seo_router)
    app.include_router(google_reviews_router)
    return app


app = create_app()
