import pytest
from fastapi.testclient import TestClient

from event_desk.api import api_state
from event_desk.services.http import app


@pytest.fixture
def client(app_settings):
    api_state.reset(app_settings)
    with TestClient(app) as test_client:
        yield test_client
    api_state.reset()


@pytest.fixture
def call(client):
    def _call(name, /, **arguments):
        return client.post(f"/api/functions/{name}", json={"arguments": arguments})

    return _call


@pytest.fixture
def admin_token(call):
    response = call("login", username="admin", password="admin123")
    assert response.json()["result"]["is_admin"] is True
    return response.json()["result"]["token"]
