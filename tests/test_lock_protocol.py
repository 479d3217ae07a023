"""Update/delete guard, exercised identically for every catalog entity."""

import pytest

from store_admin.db.models import Image
from tests.helpers import (
    ENTITIES,
    REQUIRED_CASES,
    OWNER_HEADERS,
    OTHER_HEADERS,
    fetch,
    lock,
    snapshot,
)

ENTITY_NAMES = list(ENTITIES)


def entity_url(entity, store_id="store1"):
    return f"/api/{store_id}/{entity}/{ENTITIES[entity]['id']}"


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_patch_locked_row_returns_409_and_leaves_it_unchanged(client, catalog, entity):
    config = ENTITIES[entity]
    lock(catalog, config["model"], config["id"])
    before = snapshot(fetch(catalog, config["model"], config["id"]))

    res = client.patch(entity_url(entity), json=config["body"], headers=OWNER_HEADERS)

    assert res.status_code == 409
    assert res.text == "Conflict"
    assert snapshot(fetch(catalog, config["model"], config["id"])) == before


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_delete_locked_row_returns_409_and_keeps_it(client, catalog, entity):
    config = ENTITIES[entity]
    lock(catalog, config["model"], config["id"])

    res = client.delete(entity_url(entity), headers=OWNER_HEADERS)

    assert res.status_code == 409
    assert fetch(catalog, config["model"], config["id"]) is not None


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_patch_without_identity_returns_403(client, catalog, entity):
    config = ENTITIES[entity]
    before = snapshot(fetch(catalog, config["model"], config["id"]))

    res = client.patch(entity_url(entity), json=config["body"])

    assert res.status_code == 403
    assert res.text == "Unauthenticated"
    assert snapshot(fetch(catalog, config["model"], config["id"])) == before


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_delete_without_identity_returns_403(client, catalog, entity):
    config = ENTITIES[entity]

    res = client.delete(entity_url(entity))

    assert res.status_code == 403
    assert fetch(catalog, config["model"], config["id"]) is not None


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_blank_identity_header_counts_as_missing(client, catalog, entity):
    res = client.delete(entity_url(entity), headers={"X-User-Id": "   "})
    assert res.status_code == 403


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_patch_on_store_owned_by_someone_else_returns_405(client, catalog, entity):
    config = ENTITIES[entity]
    before = snapshot(fetch(catalog, config["model"], config["id"]))

    res = client.patch(entity_url(entity), json=config["body"], headers=OTHER_HEADERS)

    assert res.status_code == 405
    assert res.text == "Unauthorized"
    assert snapshot(fetch(catalog, config["model"], config["id"])) == before


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_delete_on_store_owned_by_someone_else_returns_405(client, catalog, entity):
    config = ENTITIES[entity]

    res = client.delete(entity_url(entity), headers=OTHER_HEADERS)

    assert res.status_code == 405
    assert fetch(catalog, config["model"], config["id"]) is not None


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_delete_on_unknown_store_returns_405(client, catalog, entity):
    res = client.delete(entity_url(entity, store_id="no-such-store"), headers=OWNER_HEADERS)
    assert res.status_code == 405


@pytest.mark.parametrize("entity,field,message", REQUIRED_CASES)
def test_patch_missing_required_field_returns_400(client, catalog, entity, field, message):
    config = ENTITIES[entity]
    body = {k: v for k, v in config["body"].items() if k != field}

    res = client.patch(entity_url(entity), json=body, headers=OWNER_HEADERS)

    assert res.status_code == 400
    assert res.text == message


@pytest.mark.parametrize("entity,field,message", REQUIRED_CASES)
def test_required_fields_are_checked_before_store_ownership(client, catalog, entity, field, message):
    # A non-owner still gets the 400: no store lookup happened yet
    config = ENTITIES[entity]
    body = {k: v for k, v in config["body"].items() if k != field}

    res = client.patch(entity_url(entity), json=body, headers=OTHER_HEADERS)

    assert res.status_code == 400
    assert res.text == message


@pytest.mark.parametrize("entity", ["billboards", "categories", "subcategories", "sizes", "colors"])
def test_empty_string_counts_as_missing(client, catalog, entity):
    config = ENTITIES[entity]
    field, message = config["required"][0]
    body = dict(config["body"], **{field: ""})

    res = client.patch(entity_url(entity), json=body, headers=OWNER_HEADERS)

    assert res.status_code == 400
    assert res.text == message


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_patch_unlocked_row_applies_the_update(client, catalog, entity):
    config = ENTITIES[entity]

    res = client.patch(entity_url(entity), json=config["body"], headers=OWNER_HEADERS)

    assert res.status_code == 200
    data = res.json()
    assert data["id"] == config["id"]
    for key, value in config["body"].items():
        if key in ("images", "price"):
            continue
        assert data[key] == value


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_locking_through_patch_blocks_later_patches(client, catalog, entity):
    config = ENTITIES[entity]
    body = dict(config["body"], isLocked=True)

    first = client.patch(entity_url(entity), json=body, headers=OWNER_HEADERS)
    second = client.patch(entity_url(entity), json=config["body"], headers=OWNER_HEADERS)

    assert first.status_code == 200
    assert first.json()["isLocked"] is True
    assert second.status_code == 409


def test_locked_product_keeps_its_images(client, catalog):
    lock(catalog, ENTITIES["products"]["model"], "prod1")

    res = client.patch(entity_url("products"), json=ENTITIES["products"]["body"], headers=OWNER_HEADERS)

    assert res.status_code == 409
    catalog.expire_all()
    urls = {image.url for image in catalog.query(Image).filter(Image.product_id == "prod1")}
    assert urls == {"https://img.test/polo-front.jpg", "https://img.test/polo-back.jpg"}


@pytest.mark.parametrize("entity", ["sizes", "colors", "products"])
def test_delete_unlocked_row_returns_it_and_removes_it(client, catalog, entity):
    config = ENTITIES[entity]

    res = client.delete(entity_url(entity), headers=OWNER_HEADERS)

    assert res.status_code == 200
    assert res.json()["id"] == config["id"]
    assert fetch(catalog, config["model"], config["id"]) is None


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_patch_through_own_store_cannot_reach_another_stores_row(client, catalog, entity):
    config = ENTITIES[entity]
    before = snapshot(fetch(catalog, config["model"], config["id"]))

    res = client.patch(entity_url(entity, store_id="store2"), json=config["body"], headers=OTHER_HEADERS)

    # Bodies that reference store1 rows are refused before the write is attempted
    assert res.status_code in (400, 405)
    assert snapshot(fetch(catalog, config["model"], config["id"])) == before


@pytest.mark.parametrize("entity", ENTITY_NAMES)
def test_delete_through_own_store_cannot_reach_another_stores_row(client, catalog, entity):
    config = ENTITIES[entity]

    res = client.delete(entity_url(entity, store_id="store2"), headers=OTHER_HEADERS)

    assert res.status_code == 405
    assert res.text == "Unauthorized"
    assert fetch(catalog, config["model"], config["id"]) is not None


@pytest.mark.parametrize("entity", ["billboards", "sizes", "colors"])
def test_patch_of_another_stores_row_returns_405(client, catalog, entity):
    config = ENTITIES[entity]

    res = client.patch(entity_url(entity, store_id="store2"), json=config["body"], headers=OTHER_HEADERS)

    assert res.status_code == 405
