from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from src.flippy.api.routes import get_config
from src.flippy.main import app


def make_config(tokens=("tok-a", "tok-b"), trigger_word="flip", strict_auth=False):
    return SimpleNamespace(
        SLACK_TOKENS=frozenset(tokens),
        SLACK_TRIGGERWORD=trigger_word,
        STRICT_AUTH=strict_auth,
    )


@pytest.fixture
def client_factory():
    def _build(**kwargs):
        config = make_config(**kwargs)
        app.dependency_overrides[get_config] = lambda: config
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory):
    return client_factory()
