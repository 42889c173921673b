#!/usr/bin/env python3
"""
Database Seed Script
Populate test data into the database

Features:
1. Create Users - a guest with a paid hotel ticket and a guest without a ticket
2. Create Sessions - one login session (JWT) per user, printed for API calls
3. Create Hotel - one hotel with rooms of different capacities
4. Create Ticket Types - remote, presential, presential with hotel
"""

import asyncio
import sys
from datetime import date

import bcrypt
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import dispose_engine, get_session_maker
from src.service.hotel_booking.domain.entity.user_entity import UserEntity
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.driven_adapter.model import (
    EnrollmentModel,
    HotelModel,
    RoomModel,
    SessionModel,
    TicketModel,
    TicketTypeModel,
    UserModel,
)
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth

DEFAULT_PASSWORD = 'P@ssw0rd'

TICKET_TYPES = [
    # name, price, is_remote, includes_hotel
    ('Remote', 100, True, False),
    ('Presential', 250, False, False),
    ('Presential with hotel', 600, False, True),
]

ROOMS = [
    # name, capacity
    ('101', 1),
    ('102', 2),
    ('103', 3),
]


async def create_ticket_types(session: AsyncSession) -> dict[str, TicketTypeModel]:
    print(f'🎟️  Creating {len(TICKET_TYPES)} ticket types...')
    ticket_types = {}
    for name, price, is_remote, includes_hotel in TICKET_TYPES:
        ticket_type = TicketTypeModel(
            name=name, price=price, is_remote=is_remote, includes_hotel=includes_hotel
        )
        session.add(ticket_type)
        ticket_types[name] = ticket_type
    await session.flush()
    return ticket_types


async def create_hotel(session: AsyncSession) -> None:
    print('🏨 Creating hotel...')
    hotel = HotelModel(name='Driven Resort', image='https://example.com/driven-resort.jpg')
    session.add(hotel)
    await session.flush()

    for name, capacity in ROOMS:
        session.add(RoomModel(name=name, capacity=capacity, hotel_id=hotel.id))
    await session.flush()
    print(f'   ✅ Created hotel ID={hotel.id} with {len(ROOMS)} rooms')


async def create_user(session: AsyncSession, *, email: str) -> UserModel:
    hashed = bcrypt.hashpw(DEFAULT_PASSWORD.encode(), bcrypt.gensalt()).decode()
    user = UserModel(email=email, password=hashed)
    session.add(user)
    await session.flush()

    token = JwtAuth().create_jwt_token(UserEntity(id=user.id, email=user.email))
    session.add(SessionModel(user_id=user.id, token=token))
    await session.flush()

    print(f'   ✅ Created user: ID={user.id}, Email={email}')
    print(f'      Bearer {token}')
    return user


async def create_users(session: AsyncSession, ticket_types: dict[str, TicketTypeModel]) -> None:
    print('👥 Creating users...')

    guest = await create_user(session, email='guest@t.com')
    enrollment = EnrollmentModel(
        user_id=guest.id,
        name='Hotel Guest',
        cpf='12345678909',
        birthday=date(1990, 1, 1),
        phone='(21) 99999-9999',
    )
    session.add(enrollment)
    await session.flush()
    session.add(
        TicketModel(
            ticket_type_id=ticket_types['Presential with hotel'].id,
            enrollment_id=enrollment.id,
            status=TicketStatus.PAID.value,
        )
    )

    await create_user(session, email='visitor@t.com')
    await session.flush()


async def verify_data() -> None:
    print('🔍 Verifying seeded data...')
    async with get_session_maker()() as session:
        for table in ['user', 'session', 'hotel', 'room', 'enrollment', 'ticket_type', 'ticket']:
            result = await session.execute(text(f'SELECT COUNT(*) FROM "{table}"'))
            print(f'   {table} count: {result.scalar()}')

        result = await session.execute(select(RoomModel.id, RoomModel.name, RoomModel.capacity))
        for room_id, name, capacity in result.all():
            print(f'      Room ID={room_id}, Name={name}, Capacity={capacity}')


async def _seed_data() -> None:
    """Seed everything in a single transaction"""
    async with get_session_maker()() as session:
        try:
            ticket_types = await create_ticket_types(session)
            await create_hotel(session)
            await create_users(session, ticket_types)

            await session.commit()
            print('✅ All data committed successfully!')

        except Exception as e:
            await session.rollback()
            print(f'❌ Rolling back: {e}')
            raise


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await _seed_data()
        await verify_data()
        await dispose_engine()

        print('=' * 50)
        print('🌱 Data seeding completed!')
        print(f'📋 Test accounts password: {DEFAULT_PASSWORD}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        sys.exit(1)


if __name__ == '__main__':
    asyncio.run(main())
