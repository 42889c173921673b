"""
Shared fixtures for hotel booking tests.

Repositories are AsyncMocks behind a fake unit of work, so no database is needed.
"""

from typing import Optional
from unittest.mock import AsyncMock, Mock

import pytest

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.enrollment_entity import Enrollment
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket, TicketType
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus


USER_ID = 7
OTHER_USER_ID = 8
HOTEL_ID = 1


class FakeUnitOfWork(AbstractUnitOfWork):
    """Unit of work whose repositories are AsyncMocks; records commit and rollback."""

    def __init__(self) -> None:
        self.booking_command_repo = AsyncMock()
        self.booking_query_repo = AsyncMock()
        self.room_query_repo = AsyncMock()
        self.enrollment_query_repo = AsyncMock()
        self.ticket_command_repo = AsyncMock()
        self.ticket_query_repo = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True


def make_room(*, room_id: int = 10, capacity: int = 2, booking_count: int = 0) -> Room:
    return Room(
        id=room_id,
        name=f'Room {room_id}',
        capacity=capacity,
        hotel_id=HOTEL_ID,
        booking_count=booking_count,
    )


def make_ticket_type(
    *, ticket_type_id: int = 3, is_remote: bool = False, includes_hotel: bool = True
) -> TicketType:
    return TicketType(
        id=ticket_type_id,
        name='Presential with hotel',
        price=600,
        is_remote=is_remote,
        includes_hotel=includes_hotel,
    )


def make_ticket(
    *,
    status: TicketStatus = TicketStatus.PAID,
    ticket_type: Optional[TicketType] = None,
    enrollment_id: int = 5,
) -> Ticket:
    ticket_type = ticket_type or make_ticket_type()
    return Ticket(
        id=11,
        ticket_type_id=ticket_type.id,
        enrollment_id=enrollment_id,
        status=status,
        ticket_type=ticket_type,
    )


def make_enrollment(*, user_id: int = USER_ID, enrollment_id: int = 5) -> Enrollment:
    return Enrollment(
        id=enrollment_id,
        user_id=user_id,
        name='Hotel Guest',
        cpf='12345678909',
        birthday=None,
        phone='(21) 99999-9999',
    )


def make_booking(
    *, booking_id: int = 20, user_id: int = USER_ID, room: Optional[Room] = None
) -> Booking:
    room = room or make_room()
    return Booking(id=booking_id, user_id=user_id, room_id=room.id, room=room)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def mock_metrics() -> Mock:
    return Mock(spec=BookingMetrics)


# Factories are exposed as fixtures so test modules need no import from conftest
@pytest.fixture
def room_factory():
    return make_room


@pytest.fixture
def ticket_type_factory():
    return make_ticket_type


@pytest.fixture
def ticket_factory():
    return make_ticket


@pytest.fixture
def enrollment_factory():
    return make_enrollment


@pytest.fixture
def booking_factory():
    return make_booking
