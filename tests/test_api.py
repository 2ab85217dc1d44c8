import pytest
from bson import ObjectId
from fastapi import Depends
from fastapi.testclient import TestClient

from structure_websites.config import Settings
from structure_websites.dependencies import (
    core_db,
    get_settings,
    get_tenant_name,
    normalize_tenant_name,
    tenant_db,
    tenant_db_factory,
)
from structure_websites.main import create_app
from tests.fakes import FakeClient

HOME_HEX = "652f1c2b9d3e4a0011111111"


def _client(mongo: FakeClient, **overrides) -> TestClient:
    app = create_app(with_lifespan=False)
    cfg = Settings(**{"local_development": False, **overrides})

    def _tenant_db(tenant: str = Depends(get_tenant_name)):
        return mongo[tenant]

    app.dependency_overrides[get_settings] = lambda: cfg
    app.dependency_overrides[tenant_db] = _tenant_db
    app.dependency_overrides[core_db] = lambda: mongo["core"]
    app.dependency_overrides[tenant_db_factory] = lambda: mongo.tenant_db
    return TestClient(app)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Acme", "acme"),
        ("  Zenith Studio ", "zenith-studio"),
        ("a.b/c$d", "abcd"),
        ("", "default"),
        (None, "default"),
        ("!!!", "default"),
    ],
)
def test_tenant_name_normalisation(raw, expected):
    assert normalize_tenant_name(raw) == expected


def test_list_documents_uses_tenant_header():
    mongo = FakeClient()
    mongo["acme"]["structure_websites"].docs.append({"_id": ObjectId(HOME_HEX), "slug": "home"})
    mongo["zenith"]["structure_websites"].docs.append({"_id": ObjectId(), "slug": "other"})

    resp = _client(mongo).get("/structure-websites", headers={"X-Client-Name": "ACME"})

    assert resp.status_code == 200
    assert resp.json() == [{"_id": HOME_HEX, "slug": "home"}]


def test_replace_document_guard_returns_403():
    resp = _client(FakeClient(), local_development=False).put(
        f"/structure-websites/{HOME_HEX}", json={"slug": "x"}, headers={"X-Client-Name": "acme"}
    )

    assert resp.status_code == 403
    assert resp.json()["operation"] == "replace_document"


def test_replace_document_in_local_development():
    mongo = FakeClient()
    client = _client(mongo, local_development=True)

    resp = client.put(f"/structure-websites/{HOME_HEX}", json={"slug": "home"}, headers={"X-Client-Name": "acme"})

    assert resp.status_code == 200
    assert resp.json() == {"_id": HOME_HEX, "slug": "home"}
    assert mongo["acme"]["structure_websites"].ids() == {ObjectId(HOME_HEX)}


def test_replace_document_with_bad_id_returns_400():
    resp = _client(FakeClient(), local_development=True).put("/structure-websites/nope", json={"slug": "x"})

    assert resp.status_code == 400


def test_apply_template_requires_platform_role_outside_local_development():
    mongo = FakeClient()
    client = _client(mongo, local_development=False)
    body = {"template_key": "template-1", "documents": [{"_id": HOME_HEX, "slug": "home"}]}

    denied = client.post("/structure-websites/templates/apply", json=body)

    assert denied.status_code == 403
    assert mongo["core"]["structure_templates"].docs == []

    allowed = client.post(
        "/structure-websites/templates/apply", json=body, headers={"X-Platform-Role": "platform_admin"}
    )

    assert allowed.status_code == 200
    assert mongo["core"]["structure_templates"].docs[0]["template_key"] == "template-1"


def test_apply_template_end_to_end():
    mongo = FakeClient()
    mongo["core"]["db_clients"].docs.extend(
        [
            {"_id": ObjectId(), "client_name": "zenith", "structure_template": "template-1"},
            {"_id": ObjectId(), "client_name": "acme", "structure_template": "template-1"},
            {"_id": ObjectId(), "client_name": "legacy", "template": "template-1"},
        ]
    )
    body = {
        "template_key": "template-1",
        "target_field": "structure_template",
        "documents": [
            {"_id": HOME_HEX, "slug": "homepage"},
            None,
            {"_id": "652f1c2b9d3e4a0011111112", "slug": "menu"},
        ],
    }

    resp = _client(mongo, local_development=True).post("/structure-websites/templates/apply", json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert data["affected_clients"] == ["acme", "zenith"]
    assert data["target_field"] == "structure_template"
    assert data["updated_documents"] == 4
    assert data["deleted_documents"] == 0


def test_apply_template_validation_errors():
    client = _client(FakeClient(), local_development=True)

    missing_docs = client.post("/structure-websites/templates/apply", json={"template_key": "t", "documents": []})
    bad_id = client.post(
        "/structure-websites/templates/apply", json={"template_key": "t", "documents": [{"_id": "zz"}]}
    )

    assert missing_docs.status_code == 400
    assert bad_id.status_code == 400


def test_fan_out_failure_returns_502_with_tenant():
    mongo = FakeClient()
    mongo["core"]["db_clients"].docs.append({"_id": ObjectId(), "client_name": "acme", "structure_template": "t"})
    mongo["acme"]["structure_websites"].fail_on.add("replace_one")

    resp = _client(mongo, local_development=True).post(
        "/structure-websites/templates/apply", json={"template_key": "t", "documents": [{"slug": "x"}]}
    )

    assert resp.status_code == 502
    assert resp.json()["tenant"] == "acme"


def test_seo_routes():
    mongo = FakeClient()
    mongo["acme"]["structure_seo"].docs.append({"_id": ObjectId(), "pageKey": "blog/post-1", "title": "Post"})
    client = _client(mongo)
    headers = {"X-Client-Name": "acme"}

    found = client.get("/seo/blog/post-1", headers=headers)
    missing = client.get("/seo/nothing", headers=headers)
    no_config = client.get("/seo-config", headers=headers)
    full = client.get("/seo-config/full", headers=headers)

    assert found.status_code == 200
    assert found.json()["title"] == "Post"
    assert found.json()["open_graph"]["og_type"] == "website"
    assert missing.status_code == 404
    assert no_config.status_code == 404
    assert full.status_code == 403


def test_google_reviews_route():
    mongo = FakeClient()
    mongo["acme"]["google_reviews"].docs.append(
        {"_id": ObjectId(), "name": "Acme", "rating": 5, "reviews": [{"status": True, "text": "Nice"}]}
    )

    resp = _client(mongo).get("/google-reviews", headers={"X-Client-Name": "acme"})

    assert resp.status_code == 200
    assert resp.json()["reviews"][0]["reviews"][0]["text"] == "Nice"


def test_health():
    resp = _client(FakeClient()).get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_fan_out_to_unusable_client_name_returns_502():
    mongo = FakeClient()
    mongo["core"]["db_clients"].docs.append({"_id": ObjectId(), "client_name": "acme corp", "structure_template": "t"})

    resp = _client(mongo, local_development=True).post(
        "/structure-websites/templates/apply", json={"template_key": "t", "documents": [{"slug": "x"}]}
    )

    assert resp.status_code == 502
    assert resp.json()["tenant"] == "acme corp"
    assert resp.json()["processed_clients"] == []
