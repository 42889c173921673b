"""
HTTP test fixtures.

The session repository behind authentication is overridden in the DI container;
use cases are replaced through FastAPI dependency overrides.
"""

from collections.abc import Generator
from unittest.mock import AsyncMock

from dependency_injector import providers
from fastapi.testclient import TestClient
import pytest

from src.platform.config.di import container
from src.service.hotel_booking.domain.entity.user_entity import UserEntity
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from test_main import app


@pytest.fixture
def session_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.exists.return_value = True
    return repo


@pytest.fixture
def client(session_query_repo: AsyncMock) -> Generator[TestClient, None, None]:
    with container.session_query_repo.override(providers.Object(session_query_repo)):
        with TestClient(app) as test_client:
            yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = JwtAuth().create_jwt_token(UserEntity(id=7, email='guest@t.com'))
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def override_use_case():
    """Replace a use case's `depends` with a stub whose methods are AsyncMocks."""

    def _override(use_case_cls: type, **methods: AsyncMock) -> AsyncMock:
        stub = AsyncMock(spec=use_case_cls)
        for name, method in methods.items():
            setattr(stub, name, method)
        app.dependency_overrides[use_case_cls.depends] = lambda: stub
        return stub

    return _override
