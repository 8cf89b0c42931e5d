from datetime import timedelta

import pytest

from equine.errors import ValidationError
from equine.extensions import db
from equine.model import Cart, utcnow
from equine.services import cart_service, store


def test_unknown_session_has_empty_cart(client):
    r = client.get("/api/cart/device-abc")
    assert r.status_code == 200
    assert r.get_json()["data"]["cart"] == {"sessionId": "device-abc", "items": [], "updatedAt": None}


def test_replace_then_get_returns_exact_items(client):
    first = [{"sku": "SADDLE-1", "qty": 1}, {"sku": "BRUSH", "qty": 3}]
    second = [{"sku": "HALTER", "qty": 2}]

    r = client.post("/api/cart/device-abc", json={"items": first})
    assert r.status_code == 200
    assert r.get_json()["data"]["cart"]["items"] == first

    client.post("/api/cart/device-abc", json={"items": second})
    cart = client.get("/api/cart/device-abc").get_json()["data"]["cart"]
    assert cart["items"] == second
    assert cart["updatedAt"]


def test_replace_with_empty_list(client):
    client.post("/api/cart/s1", json={"items": [{"sku": "X"}]})
    client.post("/api/cart/s1", json={"items": []})
    assert client.get("/api/cart/s1").get_json()["data"]["cart"]["items"] == []


def test_sessions_are_isolated(client):
    client.post("/api/cart/s1", json={"items": [{"sku": "X"}]})
    assert client.get("/api/cart/s2").get_json()["data"]["cart"]["items"] == []


def test_replace_requires_item_list(client):
    r = client.post("/api/cart/s1", json={"items": "saddle"})
    assert r.status_code == 400
    r = client.post("/api/cart/s1", json={})
    assert r.status_code == 400


def test_clear_cart(client):
    client.post("/api/cart/s1", json={"items": [{"sku": "X"}]})
    r = client.delete("/api/cart/s1")
    assert r.status_code == 200
    assert r.get_json()["data"]["cleared"] is True
    assert client.get("/api/cart/s1").get_json()["data"]["cart"]["items"] == []


def test_clear_missing_cart_is_not_an_error(client):
    r = client.delete("/api/cart/never-seen")
    assert r.status_code == 200
    assert r.get_json()["data"]["cleared"] is False


def test_overlong_session_reads_as_empty_but_cannot_be_saved(ctx):
    session_id = "x" * 129
    assert cart_service.get_cart(session_id)["items"] == []
    assert cart_service.clear_cart(session_id) is False
    with pytest.raises(ValidationError):
        cart_service.replace_cart(session_id, [{"sku": "X"}])


def test_replace_requires_json_object_body(client):
    r = client.post("/api/cart/s1", json=[{"sku": "X"}])
    assert r.status_code == 400
    assert r.get_json() == {"success": False, "message": "body must be a JSON object", "data": {}}


def _age_cart(session_id, seconds):
    Cart.query.filter_by(session_id=session_id).update(
        {"updated_at": utcnow() - timedelta(seconds=seconds)}
    )
    db.session.commit()


def test_expired_cart_reads_as_empty(ctx):
    cart_service.replace_cart("old", [{"sku": "X"}])
    _age_cart("old", 86400 + 60)
    assert cart_service.get_cart("old")["items"] == []


def test_cart_within_retention_survives(ctx):
    cart_service.replace_cart("recent", [{"sku": "X"}])
    _age_cart("recent", 86400 - 60)
    assert cart_service.get_cart("recent")["items"] == [{"sku": "X"}]


def test_write_to_expired_cart_starts_fresh(ctx):
    cart_service.replace_cart("old", [{"sku": "X"}])
    _age_cart("old", 2 * 86400)
    cart = cart_service.replace_cart("old", [{"sku": "Y"}])
    assert cart["items"] == [{"sku": "Y"}]
    assert cart_service.get_cart("old")["items"] == [{"sku": "Y"}]
    assert Cart.query.filter_by(session_id="old").count() == 1


def test_purge_expired_carts(ctx):
    cart_service.replace_cart("old", [{"sku": "X"}])
    cart_service.replace_cart("fresh", [{"sku": "Y"}])
    _age_cart("old", 86400 + 1)
    assert store.purge_expired_carts() == 1
    assert [c.session_id for c in Cart.query.all()] == ["fresh"]


def test_purge_carts_cli(app):
    with app.app_context():
        cart_service.replace_cart("old", [{"sku": "X"}])
        _age_cart("old", 86400 + 1)
    result = app.test_cli_runner().invoke(args=["purge-carts"])
    assert "Purged 1 expired cart(s)" in result.output
