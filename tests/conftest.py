import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("JWT_EXPIRES_MINUTES", "60")

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.db import get_notifier
from app.core.errors import DeliveryError
from app.core.security import TokenSigner
from app.main import create_app


class RecordingNotifier:
    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, to_email: str, subject: str, html_body: str):
        if self.fail:
            raise DeliveryError()
        self.sent.append({"to": to_email, "subject": subject, "html": html_body})


@pytest.fixture()
def settings():
    return Settings(
        jwt_secret_key="test-secret",
        mongo_db="auth_test",
        frontend_base_url="http://frontend.test",
    )


@pytest.fixture()
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture()
def db(mongo_client, settings):
    return mongo_client[settings.mongo_db]


@pytest.fixture()
def signer(settings):
    return TokenSigner(settings)


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def app(settings, mongo_client, notifier):
    app = create_app(settings, mongo_client=mongo_client)
    app.dependency_overrides[get_notifier] = lambda: notifier
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
