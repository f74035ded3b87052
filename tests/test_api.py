"""HTTP surface tests using FastAPI's test client."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from server import api
from stylist_app.app import StylistApp
from stylist_app.config import StylistConfig
from tools.wardrobe_store import InMemoryWardrobeStore


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    fresh = StylistApp(config=StylistConfig(), store=InMemoryWardrobeStore())
    monkeypatch.setattr(api, "stylist_app", fresh)
    return TestClient(api.app)


def test_healthcheck(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["max_items_per_category"] == 5


def test_recommendations_require_wardrobe(client: TestClient) -> None:
    response = client.post("/outfits/recommendations", json={"user_id": "nobody", "occasion": "work"})
    assert response.status_code == 400


def test_recommendations_reject_unknown_occasion(client: TestClient) -> None:
    response = client.post("/outfits/recommendations", json={"user_id": "demo", "occasion": "brunch"})
    assert response.status_code == 422


def test_seed_then_recommend(client: TestClient) -> None:
    seeded = client.post("/clothing/demo/seed")
    assert seeded.status_code == 200
    assert len(seeded.json()["items"]) == 6
    assert client.post("/clothing/demo/seed").json()["items"] == []

    response = client.post(
        "/outfits/recommendations",
        json={"user_id": "demo", "occasion": "work", "max_recommendations": 2, "preferred_colors": ["navy"]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total_count"] == len(body["recommendations"]) <= 2
    first = body["recommendations"][0]
    assert 0 <= first["confidence"] <= 1
    assert first["occasion"] == "work"
    assert first["reasoning"].endswith(".")

    quick = client.post("/outfits/quick", json={"user_id": "demo", "occasion": "party"})
    assert quick.status_code == 200
    assert quick.json()["total_count"] <= 3


def test_add_wear_and_favorite_item(client: TestClient) -> None:
    created = client.post(
        "/clothing/demo",
        json={"item_id": "boots-1", "name": "Brown Boots", "category": "shoes", "colors": ["brown"], "style": "casual"},
    )
    assert created.status_code == 201
    assert created.json()["primary_color"] == "brown"

    worn = client.post("/clothing/demo/boots-1/wear")
    assert worn.status_code == 200
    assert worn.json()["wear_count"] == 1
    assert client.post("/clothing/demo/boots-1/favorite").json()["is_favorite"] is True
    assert client.post("/clothing/demo/missing/wear").status_code == 404

    listed = client.get("/clothing/demo").json()
    assert listed["total_count"] == 1


def test_add_item_rejects_bad_payloads(client: TestClient) -> None:
    bad_category = client.post("/clothing/demo", json={"category": "hats", "style": "casual", "colors": ["red"]})
    assert bad_category.status_code == 422

    bad_primary = client.post(
        "/clothing/demo",
        json={"category": "tops", "style": "casual", "colors": ["red"], "primary_color": "blue"},
    )
    assert bad_primary.status_code == 400


def test_reset_replaces_wardrobe(client: TestClient) -> None:
    client.post("/clothing/demo", json={"category": "tops", "style": "casual", "colors": ["red"]})
    response = client.post("/clothing/demo/reset")
    assert response.status_code == 200
    assert client.get("/clothing/demo").json()["total_count"] == 6


def test_import_item_from_product_metadata(client: TestClient) -> None:
    response = client.post(
        "/clothing/demo/import",
        json={
            "title": "Black Leather Boots",
            "description": "Sturdy boots for everyday wear",
            "source_url": "https://shop.example.com/boots",
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["category"] == "shoes"
    assert body["item_type"] == "boots"
    assert body["colors"] == ["black"]
    assert body["seasons"] == ["fall", "winter"]

    assert client.post("/clothing/demo/import", json={"title": "Tee", "colors": ["teal"]}).status_code == 400
    assert client.post("/clothing/demo/import", json={"title": "Tee", "category": "hats"}).status_code == 422


def test_update_and_delete_item(client: TestClient) -> None:
    client.post(
        "/clothing/demo",
        json={"item_id": "tee-1", "category": "tops", "colors": ["red", "white"], "style": "casual"},
    )

    updated = client.put("/clothing/demo/tee-1", json={"primary_color": "white", "style": "Sporty"})
    assert updated.status_code == 200
    assert updated.json()["primary_color"] == "white"
    assert updated.json()["style"] == "sporty"

    assert client.put("/clothing/demo/tee-1", json={"primary_color": "green"}).status_code == 400
    assert client.put("/clothing/demo/missing", json={"name": "Ghost"}).status_code == 404

    deleted = client.delete("/clothing/demo/tee-1")
    assert deleted.status_code == 200
    assert deleted.json() == {"deleted": "tee-1"}
    assert client.delete("/clothing/demo/tee-1").status_code == 404
    assert client.get("/clothing/demo").json()["total_count"] == 0


def test_quick_suggestions_accept_zero(client: TestClient) -> None:
    client.post("/clothing/demo/seed")
    response = client.post("/outfits/quick", json={"user_id": "demo", "occasion": "casual", "max_suggestions": 0})
    assert response.status_code == 200
    assert response.json()["total_count"] == 0
