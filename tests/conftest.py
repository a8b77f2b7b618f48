import pytest

from gridlab.app import create_app


@pytest.fixture
def app():
    return create_app({"TESTING": True, "RATE_LIMIT": 1000, "RATE_WINDOW": 60})


@pytest.fixture
def client(app):
    return app.test_client()
