"""Foreign keys in request bodies must point at rows of the path's store."""

import pytest

from store_admin.db.models import Category, Color, Product
from tests.helpers import OTHER_HEADERS, OWNER_HEADERS, fetch, snapshot


@pytest.fixture
def other_color(catalog):
    catalog.add(Color(id="color2", store_id="store2", name="Green", value="#0F0"))
    catalog.commit()
    return "color2"


def _product_body(**overrides):
    body = {
        "name": "Polo shirt",
        "price": "19.99",
        "categoryId": "cat1",
        "subcategoryId": "sub1",
        "images": [{"url": "https://img.test/polo.jpg"}],
    }
    body.update(overrides)
    return body


@pytest.mark.parametrize("entity,body,message", [
    ("categories", {"name": "Borrowed", "billboardId": "bb1"}, "Billboard id is invalid"),
    ("subcategories", {"name": "Borrowed", "categoryId": "cat1"}, "Category id is invalid"),
    ("products", _product_body(), "Category id is invalid"),
])
def test_create_pointing_at_another_store_returns_400(client, catalog, entity, body, message):
    res = client.post(f"/api/store2/{entity}", json=body, headers=OTHER_HEADERS)

    assert res.status_code == 400
    assert res.text == message
    assert client.get(f"/api/store2/{entity}").json() == []


def test_unknown_reference_returns_400(client, catalog):
    res = client.post("/api/store1/products", json=_product_body(sizeId="no-such-size"), headers=OWNER_HEADERS)

    assert res.status_code == 400
    assert res.text == "Size id is invalid"


def test_patch_cannot_attach_another_stores_color(client, catalog, other_color):
    before = snapshot(fetch(catalog, Product, "prod1"))

    res = client.patch("/api/store1/products/prod1", json=_product_body(colorId=other_color), headers=OWNER_HEADERS)

    assert res.status_code == 400
    assert res.text == "Color id is invalid"
    assert snapshot(fetch(catalog, Product, "prod1")) == before
    assert len(fetch(catalog, Product, "prod1").images) == 2


def test_patch_cannot_point_category_at_unknown_billboard(client, catalog):
    res = client.patch(
        "/api/store1/categories/cat1",
        json={"name": "Shirts", "billboardId": "missing-billboard"},
        headers=OWNER_HEADERS,
    )

    assert res.status_code == 400
    assert fetch(catalog, Category, "cat1").billboard_id == "bb1"


def test_victims_billboard_stays_deletable(client, catalog):
    client.post("/api/store2/categories", json={"name": "Borrowed", "billboardId": "bb1"}, headers=OTHER_HEADERS)

    # cat1 is used by sub1 and prod1, so those go first
    client.delete("/api/store1/products/prod1", headers=OWNER_HEADERS)
    client.delete("/api/store1/subcategories/sub1", headers=OWNER_HEADERS)
    client.delete("/api/store1/categories/cat1", headers=OWNER_HEADERS)

    assert client.delete("/api/store1/billboards/bb1", headers=OWNER_HEADERS).status_code == 200


def test_references_inside_the_store_are_accepted(client, catalog):
    res = client.post(
        "/api/store1/products",
        json=_product_body(sizeId="size1", colorId="color1"),
        headers=OWNER_HEADERS,
    )

    assert res.status_code == 200
    assert res.json()["sizeId"] == "size1"
