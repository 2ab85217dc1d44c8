# structure_websites/services/google_reviews_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from structure_websites.core.identity import ID_FIELD, parse_object_id
from structure_websites.dal.google_reviews_dal import GoogleReviewsDAL
from structure_websites.errors import InvalidIdentityError, StorageError
from structure_websites.models import GoogleReview, GoogleReviewsResponse, Review

logger = logging.getLogger("structure_websites.services.google_reviews")


def visible_reviews(reviews: Any) -> List[Dict[str, Any]]:
    """Published reviews only: status is True and text is a non-empty string."""
    if not isinstance(reviews, list):
        return []
    return [
        r
        for r in reviews
        if isinstance(r, dict)
        and r.get("status") is True
        and isinstance(r.get("text"), str)
        and r["text"] != ""
    ]


def to_google_review(doc: Mapping[str, Any]) -> GoogleReview:
    raw_id = doc.get(ID_FIELD)
    if isinstance(raw_id, ObjectId):
        oid = raw_id
    elif isinstance(raw_id, str):
        oid = parse_object_id(raw_id, operation="google_reviews")
    else:
        raise InvalidIdentityError("unexpected type for _id", operation="google_reviews", value=raw_id)

    return GoogleReview(
        id=str(oid),
        name=doc.get("name"),
        rating=doc.get("rating"),
        reviews=[Review.model_validate(r) for r in visible_reviews(doc.get("reviews"))],
    )


class GoogleReviewsService:
    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.dal = GoogleReviewsDAL(db)

    async def list_reviews(self) -> GoogleReviewsResponse:
        try:
            docs = await self.dal.list_all()
        except PyMongoError as e:
            logger.exception("[google_reviews] error fetching google reviews data")
            raise StorageError(f"error fetching google reviews: {e}", operation="google_reviews", cause=e) from e

        logger.info("[google_reviews] found %d review document(s)", len(docs))
        return GoogleReviewsResponse(reviews=[to_google_review(d) for d in docs])
