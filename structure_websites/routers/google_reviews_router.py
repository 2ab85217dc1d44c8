# structure_websites/routers/google_reviews_router.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from structure_websites.dependencies import tenant_db
from structure_websites.models import GoogleReviewsResponse
from structure_websites.services.google_reviews_service import GoogleReviewsService

router = APIRouter(prefix="/google-reviews", tags=["google-reviews"])


@router.get("", response_model=GoogleReviewsResponse)
async def get_google_reviews(db: AsyncIOMotorDatabase = Depends(tenant_db)) -> GoogleReviewsResponse:
    return await GoogleReviewsService(db).list_reviews()
