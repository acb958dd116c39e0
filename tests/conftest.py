import pytest
from fastapi.testclient import TestClient

from recipe_planner.app.core.config import get_settings
from recipe_planner.app.main import create_app


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)
