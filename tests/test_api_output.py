"""Tests for the /pack service output and input validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from box_packer.api import app

client = TestClient(app)

PRODUCTS = [
    {"id": 1, "name": "Product 1", "length": 10, "width": 10, "height": 10, "weight": 20},
    {"id": 2, "name": "Product 2", "length": 5, "width": 5, "height": 5, "weight": 10},
]
BOXES = [
    {"id": 1, "name": "Box 1", "length": 15, "width": 15, "height": 15, "weight_limit": 100},
    {"id": 2, "name": "Box 2", "length": 10, "width": 10, "height": 10, "weight_limit": 50},
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BOX_PACKER_CATALOG", raising=False)
    monkeypatch.delenv("BOX_PACKER_MAX_SELECTIONS", raising=False)


@pytest.fixture
def catalog_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"products": PRODUCTS, "boxes": BOXES}), encoding="utf-8")
    monkeypatch.setenv("BOX_PACKER_CATALOG", str(path))
    return path


def test_pack_with_inline_catalog() -> None:
    request = {
        "selections": [{"product_id": 1, "quantity": 3}, {"product_id": 2, "quantity": 2}],
        "products": PRODUCTS,
        "boxes": BOXES,
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    data = response.json()
    assert data["metrics"] == {"success": True, "box_count": 1, "units_packed": 5, "units_unpacked": 0}
    result = data["result"]
    assert result["success"] is True
    assert result["unpackable_products"] == []
    packed = result["packed_boxes"][0]
    assert packed["box"]["name"] == "Box 1"
    assert packed["total_weight"] == 80
    assert packed["remaining_weight"] == 20
    assert [item["quantity"] for item in packed["products"]] == [3, 2]
    assert "Box 1: Box 1" in data["summary"]


def test_pack_reports_unpackable() -> None:
    request = {
        "selections": [{"product_id": 1, "quantity": 10}],
        "products": [dict(PRODUCTS[0], weight=100)],
        "boxes": BOXES[:1],
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    data = response.json()
    assert data["result"]["success"] is False
    entry = data["result"]["unpackable_products"][0]
    assert entry["quantity"] == 10
    assert entry["reason"] == "No suitable box found for product dimensions or weight"


def test_pack_uses_configured_catalog(catalog_file: Path) -> None:
    response = client.post("/pack", json={"selections": [{"product_id": 2, "quantity": 1}]})

    assert response.status_code == 200
    assert response.json()["result"]["packed_boxes"][0]["box"]["name"] == "Box 2"


def test_unknown_product_returns_422() -> None:
    request = {
        "selections": [{"product_id": 42, "quantity": 1}],
        "products": PRODUCTS,
        "boxes": BOXES,
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "UNKNOWN_PRODUCT"
    assert data["details"] == {"product_id": 42, "valid_ids": [1, 2]}


def test_missing_catalog_returns_422() -> None:
    response = client.post("/pack", json={"selections": [{"product_id": 1, "quantity": 1}], "boxes": BOXES})

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "MISSING_CATALOG"
    assert data["details"] == ["products"]


def test_too_many_selections_returns_422(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOX_PACKER_MAX_SELECTIONS", "1")
    request = {
        "selections": [{"product_id": 1, "quantity": 1}, {"product_id": 2, "quantity": 1}],
        "products": PRODUCTS,
        "boxes": BOXES,
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 422
    assert response.json()["error"] == "TOO_MANY_SELECTIONS"


def test_invalid_quantity_rejected() -> None:
    request = {
        "selections": [{"product_id": 1, "quantity": 0}],
        "products": PRODUCTS,
        "boxes": BOXES,
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 422
    assert "detail" in response.json()


def test_catalog_endpoint(catalog_file: Path) -> None:
    response = client.get("/catalog")

    assert response.status_code == 200
    assert [b["name"] for b in response.json()["boxes"]] == ["Box 1", "Box 2"]


def test_catalog_endpoint_without_catalog() -> None:
    assert client.get("/catalog").status_code == 404


def test_health(catalog_file: Path) -> None:
    response = client.get("/health")
    assert response.json() == {"ok": True, "has_catalog": True}


def test_unreadable_configured_catalog_returns_422(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOX_PACKER_CATALOG", str(tmp_path / "missing.json"))

    pack_response = client.post("/pack", json={"selections": [{"product_id": 1, "quantity": 1}]})
    catalog_response = client.get("/catalog")

    for response in (pack_response, catalog_response):
        assert response.status_code == 422
        assert response.json()["error"] == "MISSING_CATALOG"


def test_invalid_configured_catalog_returns_422(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"products": [dict(PRODUCTS[0], weight=-1)], "boxes": BOXES}), encoding="utf-8")
    monkeypatch.setenv("BOX_PACKER_CATALOG", str(path))

    response = client.post("/pack", json={"selections": [{"product_id": 1, "quantity": 1}]})

    assert response.status_code == 422
    assert response.json()["error"] == "MISSING_CATALOG"


def test_inline_catalog_ignores_broken_configured_catalog(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOX_PACKER_CATALOG", str(tmp_path / "missing.json"))
    request = {
        "selections": [{"product_id": 2, "quantity": 1}],
        "products": PRODUCTS,
        "boxes": BOXES,
    }

    assert client.post("/pack", json=request).status_code == 200
