import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.rates.store import RateStore

API_TOKEN = "test-token"


@pytest.fixture
def settings() -> Settings:
    settings = Settings(api_token=API_TOKEN, debug=False)
    settings.init_post_load()
    return settings


@pytest.fixture
def app(settings):
    return create_app(settings_override=settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(app) -> RateStore:
    return app.state.rate_store


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {API_TOKEN}"}
