import logging

from store_admin.db.models import Billboard
from store_admin.errors import InternalError
from tests.helpers import OWNER_HEADERS


def test_unhandled_error_is_logged_with_route_tag(client, catalog, caplog):
    with caplog.at_level(logging.ERROR, logger="store_admin.error_handlers"):
        res = client.delete("/api/store1/billboards/bb1", headers=OWNER_HEADERS)

    assert res.status_code == 500
    assert res.text == "Internal error"
    assert any("[BILLBOARD_DELETE]" in record.getMessage() for record in caplog.records)
    assert any(getattr(record, "route_tag", None) == "BILLBOARD_DELETE" for record in caplog.records)


def test_internal_error_detail_is_not_leaked(client, catalog):
    res = client.patch(
        "/api/store1/colors/missing",
        json={"name": "Red", "value": "#F00"},
        headers=OWNER_HEADERS,
    )

    assert res.status_code == 500
    assert "missing" not in res.text


def test_internal_error_is_logged_with_traceback(client, catalog, caplog):
    with caplog.at_level(logging.ERROR, logger="store_admin.error_handlers"):
        res = client.delete("/api/store1/sizes/missing", headers=OWNER_HEADERS)

    assert res.status_code == 500
    record = next(r for r in caplog.records if "[SIZE_DELETE]" in r.getMessage())
    assert record.exc_info is not None
    assert record.exc_info[0] is InternalError


def test_wrongly_typed_field_is_a_400(client, catalog):
    res = client.patch(
        "/api/store1/billboards/bb1",
        json={"label": "Winter", "imageUrl": "https://img.test/w.jpg", "isFeatured": "not-a-bool"},
        headers=OWNER_HEADERS,
    )

    assert res.status_code == 400
    assert "isFeatured" in res.text


def test_malformed_json_is_a_400(client, catalog):
    res = client.patch(
        "/api/store1/billboards/bb1",
        content=b"{not json",
        headers={**OWNER_HEADERS, "Content-Type": "application/json"},
    )

    assert res.status_code == 400


def test_lock_conflict_is_logged_as_warning(client, catalog, caplog):
    catalog.query(Billboard).filter(Billboard.id == "bb1").update({"is_locked": True})
    catalog.commit()

    with caplog.at_level(logging.WARNING, logger="store_admin.lock_guard"):
        client.delete("/api/store1/billboards/bb1", headers=OWNER_HEADERS)

    assert any(record.levelno == logging.WARNING and "locked" in record.getMessage() for record in caplog.records)


def test_health_reports_database(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
