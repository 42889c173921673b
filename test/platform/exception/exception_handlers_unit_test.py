from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
)


class _Body(BaseModel):
    room_id: int


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    errors = {
        'domain': DomainError('Bad input'),
        'auth': AuthenticationError(),
        'payment': PaymentRequiredError(),
        'forbidden': ForbiddenError('Room is full'),
        'missing': NotFoundError('Room not found'),
        'conflict': ConflictError('Duplicate'),
        'value': ValueError('Broken value'),
        'boom': RuntimeError('boom'),
    }

    @app.get('/raise/{name}')
    async def raise_error(name: str) -> None:
        raise errors[name]

    @app.post('/body')
    async def body(payload: _Body) -> dict[str, int]:
        return {'room_id': payload.room_id}

    return app


@pytest.fixture
def client() -> TestClient:
    # raise_server_exceptions=False so the catch-all handler answers instead of re-raising
    return TestClient(_build_app(), raise_server_exceptions=False)


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.mark.parametrize(
        'name,status_code,detail',
        [
            ('domain', 400, 'Bad input'),
            ('auth', 401, 'Not authenticated'),
            ('payment', 402, 'Payment information is required'),
            ('forbidden', 403, 'Room is full'),
            ('missing', 404, 'Room not found'),
            ('conflict', 409, 'Duplicate'),
            ('value', 400, 'Broken value'),
        ],
    )
    def test_error_maps_to_status(
        self, client: TestClient, name: str, status_code: int, detail: str
    ) -> None:
        response = client.get(f'/raise/{name}')

        assert response.status_code == status_code
        assert response.json() == {'detail': detail}

    def test_unexpected_error_is_500(self, client: TestClient) -> None:
        response = client.get('/raise/boom')

        assert response.status_code == 500
        assert response.json() == {'detail': 'Internal server error'}

    def test_request_validation_is_400(self, client: TestClient) -> None:
        response = client.post('/body', json={'room_id': 'abc'})

        assert response.status_code == 400
        assert response.json()['detail'][0]['loc'] == ['body', 'room_id']
