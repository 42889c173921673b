"""HTTP tests for /tickets"""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
import pytest

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.service.hotel_booking.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.hotel_booking.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.hotel_booking.app.query.list_ticket_types_use_case import (
    ListTicketTypesUseCase,
)
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus


@pytest.mark.unit
class TestTicketApi:
    def test_list_ticket_types(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        override_use_case,
        ticket_type_factory,
    ) -> None:
        override_use_case(
            ListTicketTypesUseCase,
            list_all=AsyncMock(
                return_value=[
                    ticket_type_factory(ticket_type_id=1, is_remote=True, includes_hotel=False),
                    ticket_type_factory(ticket_type_id=2),
                ]
            ),
        )

        response = client.get('/tickets/types', headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert [item['id'] for item in body] == [1, 2]
        assert body[0]['isRemote'] is True
        assert body[0]['includesHotel'] is False

    def test_list_ticket_types_requires_auth(self, client: TestClient) -> None:
        assert client.get('/tickets/types').status_code == 401

    def test_create_ticket(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        override_use_case,
        ticket_factory,
    ) -> None:
        execute = AsyncMock(return_value=ticket_factory(status=TicketStatus.RESERVED))
        override_use_case(CreateTicketUseCase, execute=execute)

        response = client.post('/tickets', json={'ticketTypeId': 3}, headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body['status'] == 'RESERVED'
        assert body['ticketTypeId'] == 3
        assert body['TicketType']['includesHotel'] is True
        execute.assert_awaited_once_with(user_id=7, ticket_type_id=3)

    def test_create_ticket_conflict(
        self, client: TestClient, auth_headers: dict[str, str], override_use_case
    ) -> None:
        override_use_case(
            CreateTicketUseCase,
            execute=AsyncMock(
                side_effect=ConflictError('A ticket for this enrollment already exists')
            ),
        )

        response = client.post('/tickets', json={'ticketTypeId': 3}, headers=auth_headers)

        assert response.status_code == 409

    def test_get_ticket(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        override_use_case,
        ticket_factory,
    ) -> None:
        override_use_case(
            GetTicketUseCase, get_by_user_id=AsyncMock(return_value=ticket_factory())
        )

        response = client.get('/tickets', headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'PAID'
        assert body['enrollmentId'] == 5
        assert body['TicketType']['id'] == 3

    def test_get_ticket_not_found(
        self, client: TestClient, auth_headers: dict[str, str], override_use_case
    ) -> None:
        override_use_case(
            GetTicketUseCase,
            get_by_user_id=AsyncMock(side_effect=NotFoundError('Ticket not found')),
        )

        response = client.get('/tickets', headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {'detail': 'Ticket not found'}
