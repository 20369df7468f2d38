import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")

import pytest
from fastapi.testclient import TestClient

from eks_landing.config import Settings
from eks_landing.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None, app_env="test", metrics_enabled=True)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
