import pytest
from fastapi.testclient import TestClient

from tasrif.config import Settings
from tasrif.root_types import Root
from tasrif.web.main import create_app


@pytest.fixture
def ktb():
    """ك-ت-ب, to write."""
    return Root('ك', 'ت', 'ب')


@pytest.fixture
def settings():
    return Settings(
        host='127.0.0.1',
        port=8000,
        cors_origins=['http://localhost:5173'],
        log_level='DEBUG',
        default_root='كتب',
        default_irregular='hollow',
    )


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
