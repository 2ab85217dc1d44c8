import pytest
from bson import ObjectId

from structure_websites.errors import InvalidIdentityError
from structure_websites.services.google_reviews_service import GoogleReviewsService, to_google_review, visible_reviews

pytestmark = pytest.mark.anyio


def test_only_published_reviews_with_text_are_visible():
    reviews = [
        {"author_name": "A", "status": True, "text": "Great"},
        {"author_name": "B", "status": False, "text": "Hidden"},
        {"author_name": "C", "status": True, "text": ""},
        {"author_name": "D", "status": "true", "text": "Not a bool"},
        {"author_name": "E", "status": True},
        "junk",
    ]

    assert [r["author_name"] for r in visible_reviews(reviews)] == ["A"]
    assert visible_reviews(None) == []


def test_review_document_conversion():
    oid = ObjectId()
    review = to_google_review(
        {
            "_id": str(oid),
            "name": "Acme Cafe",
            "rating": 4.7,
            "reviews": [{"author_name": "A", "rating": 5, "status": True, "text": "Great", "url_user": None}],
        }
    )

    assert review.id == str(oid)
    assert review.rating == 4
    assert review.reviews[0].author_name == "A"
    assert review.reviews[0].rating == 5
    assert review.reviews[0].url_user == ""


def test_review_document_with_bad_id_is_rejected():
    with pytest.raises(InvalidIdentityError):
        to_google_review({"_id": 17})
    with pytest.raises(InvalidIdentityError):
        to_google_review({"_id": "not-hex"})


async def test_list_reviews(mongo):
    db = mongo["acme"]
    await db["google_reviews"].insert_one(
        {"name": "Acme", "rating": 5, "reviews": [{"status": True, "text": "ok"}, {"status": False, "text": "no"}]}
    )

    resp = await GoogleReviewsService(db).list_reviews()

    assert len(resp.reviews) == 1
    assert len(resp.reviews[0].reviews) == 1
    assert resp.reviews[0].name == "Acme"
