"""Tests API FastAPI — /block-composer/* via TestClient."""
import pytest
from fastapi.testclient import TestClient

from block_composer.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["block_types"] == 37


def test_validate_link(client):
    r = client.post("/block-composer/links/validate", json={"value": "ftp://x", "kind": "external"})
    assert r.status_code == 200
    assert r.json() == {"valid": False, "message": "URL must start with http:// or https://"}

    r = client.post("/block-composer/links/validate", json={"value": "a@b.co", "kind": "email"})
    assert r.json()["valid"] is True


def test_resolve_link(client):
    r = client.post("/block-composer/links/resolve", json={
        "link": {"kind": "email", "email": "x@y.com", "subject": "Hi There"},
    })
    assert r.status_code == 200
    body = r.json()
    assert body["kind"] == "email"
    assert body["href"] == "mailto:x@y.com?subject=Hi%20There"
    assert body["label"] == "Email"


def test_resolve_link_rejects_unknown_kind(client):
    r = client.post("/block-composer/links/resolve", json={"link": {"kind": "bogus"}})
    assert r.status_code == 422


def test_render(client):
    r = client.post("/block-composer/render", json={
        "page": {"name": "Demo", "blocks": [{"id": "h", "type": "hero", "props": {"title": "Hello API"}}]},
        "theme": {"primary_color": "#111111"},
    })
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Hello API" in r.text
    assert "--color-primary: #111111" in r.text


def test_catalog(client):
    body = client.get("/block-composer/catalog").json()
    assert sum(len(group["blocks"]) for group in body["blocks"]) == 37
    assert len(body["links"]) == 12
    assert len(body["animations"]) == 36
    assert {p["id"] for p in body["social_platforms"]} >= {"twitter", "linkedin"}


def test_templates(client):
    body = client.get("/block-composer/templates").json()
    assert len(body["templates"]) == 6
    landing = next(t for t in body["templates"] if t["id"] == "landing")
    assert landing["blocks"] == 5


def test_expand_template(client):
    r = client.post("/block-composer/templates/landing/expand")
    assert r.status_code == 200
    blocks = r.json()["blocks"]
    assert len(blocks) == 5
    assert blocks[0]["type"] == "hero"
    assert all(b["id"] for b in blocks)


def test_expand_unknown_template(client):
    r = client.post("/block-composer/templates/nope/expand")
    assert r.status_code == 404
    assert "error" in r.json()
