import itertools

import pytest

from equine import create_app
from equine.config import TestingConfig
from equine.extensions import db


@pytest.fixture
def app(tmp_path):
    class _Config(TestingConfig):
        UPLOAD_FOLDER = str(tmp_path / "uploads")

    app = create_app(_Config)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def admin_headers(client):
    r = client.post("/api/admin/login", json={"password": TestingConfig.ADMIN_PASSWORD})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.get_json()['data']['token']}"}


@pytest.fixture
def make_order(client):
    ids = itertools.count(2000)

    def _make(**body):
        body.setdefault("orderId", f"EQ-{next(ids)}")
        body.setdefault("total", 100)
        body.setdefault("items", [{"sku": "SADDLE-1", "qty": 1}])
        r = client.post("/api/orders", json=body)
        assert r.status_code == 201, r.get_json()
        return r.get_json()["data"]["order"]
    return _make
