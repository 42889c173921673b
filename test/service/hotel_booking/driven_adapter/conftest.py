"""
Real PostgreSQL fixtures for the repository integration tests.

The test database (POSTGRES_DB from test/conftest.py) is created on demand,
tables come from ``create_db_and_tables`` and every table is truncated before
each test. Tests are skipped when no PostgreSQL server is reachable.
"""

from datetime import date
from typing import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_session_maker,
)
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.driven_adapter.model import (
    EnrollmentModel,
    HotelModel,
    RoomModel,
    TicketModel,
    TicketTypeModel,
    UserModel,
)


_TABLES = 'booking, ticket, enrollment, ticket_type, room, hotel, session, "user"'


async def _ensure_test_database() -> None:
    admin_url = settings.DATABASE_URL_ASYNC.rsplit('/', 1)[0] + '/postgres'
    engine = create_async_engine(admin_url, isolation_level='AUTOCOMMIT')
    try:
        async with engine.connect() as conn:
            exists = await conn.scalar(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': settings.POSTGRES_DB},
            )
            if not exists:
                await conn.execute(text(f'CREATE DATABASE "{settings.POSTGRES_DB}"'))
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def clean_database() -> AsyncIterator[None]:
    try:
        await _ensure_test_database()
    except (OSError, DBAPIError) as e:
        pytest.skip(f'PostgreSQL not available: {e}')

    await create_db_and_tables()
    async with get_session_maker()() as session:
        await session.execute(text(f'TRUNCATE {_TABLES} RESTART IDENTITY CASCADE'))
        await session.commit()

    yield

    # One engine per event loop; each test runs on a fresh loop
    await dispose_engine()


@pytest_asyncio.fixture
async def hotel_rooms(clean_database: None) -> dict[str, int]:
    """A hotel with a single room and a double room."""
    async with get_session_maker()() as session:
        hotel = HotelModel(name='Driven Hotel', image='https://example.com/hotel.png')
        session.add(hotel)
        await session.flush()

        single = RoomModel(name='101', capacity=1, hotel_id=hotel.id)
        double = RoomModel(name='102', capacity=2, hotel_id=hotel.id)
        session.add_all([single, double])
        await session.commit()

        return {'hotel_id': hotel.id, 'single_room_id': single.id, 'double_room_id': double.id}


@pytest_asyncio.fixture
async def hotel_ticket_type(clean_database: None) -> int:
    async with get_session_maker()() as session:
        ticket_type = TicketTypeModel(
            name='Presential with hotel', price=600, is_remote=False, includes_hotel=True
        )
        session.add(ticket_type)
        await session.commit()
        return ticket_type.id


@pytest.fixture
def guest_factory(hotel_ticket_type: int):
    """Create a user with an enrollment, optionally holding a PAID hotel ticket."""

    async def _create(email: str, *, with_ticket: bool = True) -> dict[str, int]:
        async with get_session_maker()() as session:
            user = UserModel(email=email, password='hashed')
            session.add(user)
            await session.flush()

            enrollment = EnrollmentModel(
                user_id=user.id,
                name=email.split('@')[0],
                cpf='12345678901',
                birthday=date(1990, 1, 1),
                phone='+55 11 99999-0000',
            )
            session.add(enrollment)
            await session.flush()

            if with_ticket:
                session.add(
                    TicketModel(
                        ticket_type_id=hotel_ticket_type,
                        enrollment_id=enrollment.id,
                        status=TicketStatus.PAID.value,
                    )
                )
            await session.commit()
            return {'user_id': user.id, 'enrollment_id': enrollment.id}

    return _create
