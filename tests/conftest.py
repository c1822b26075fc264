import pytest

from giftdraw import create_app
from giftdraw.services import roster


ADMIN_PASSWORD = "letmein"
NAMES = ["Alice", "Bob", "Carol", "Dave", "Erin", "Frank", "Grace", "Heidi", "Ivan", "Judy"]


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'giftdraw.db'}",
        "WTF_CSRF_ENABLED": False,
        "ADMIN_PASSWORD": ADMIN_PASSWORD,
    })
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def ctx(app):
    """App context for calling services directly."""
    with app.app_context():
        yield


@pytest.fixture()
def seeded(app):
    with app.app_context():
        roster.replace_all(NAMES)
    return NAMES


@pytest.fixture()
def admin_client(client):
    resp = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client
