from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from employee_api.core.config import Settings
from employee_api.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def app():
    return create_app(Settings())


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def employee_service(app):
    return app.state.employee_service


def create_payload(**overrides) -> dict:
    payload = {
        "FirstName": "John",
        "LastName": "Doe",
        "SocialSecurityNumber": "123-46-7890",
    }
    payload.update(overrides)
    return payload


def update_payload(**overrides) -> dict:
    payload = {
        "Address1": "1 Main St",
        "City": "Springfield",
        "State": "IL",
        "ZipCode": "62701",
    }
    payload.update(overrides)
    return payload
