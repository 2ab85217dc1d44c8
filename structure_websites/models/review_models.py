# structure_websites/models/review_models.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from structure_websites.models.fields import Bool, Int, Str


class Review(BaseModel):
    author_name: Str = ""
    rating: Int = 0
    text: Str = ""
    relative_time_description: Str = ""
    retrieval_date: Str = ""
    status: Bool = False
    id_review: Str = ""
    n_review_user: Str = ""
    n_photo_user: Str = ""
    url_user: Str = ""


class GoogleReview(BaseModel):
    id: str
    name: Str = ""
    rating: Int = 0
    reviews: List[Review] = Field(default_factory=list)


class GoogleReviewsResponse(BaseModel):
    reviews: List[GoogleReview] = Field(default_factory=list)
