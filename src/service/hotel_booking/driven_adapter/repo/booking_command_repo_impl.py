from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.database.session_aware_repo import SessionAwareRepo
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.driven_adapter.model import BookingModel
from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)


class BookingCommandRepoImpl(SessionAwareRepo, IBookingCommandRepo):
    @staticmethod
    async def _reload(session: AsyncSession, booking_id: int) -> BookingModel:
        # populate_existing refreshes server-side timestamps on an already loaded row
        result = await session.execute(
            select(BookingModel)
            .options(selectinload(BookingModel.room))
            .where(BookingModel.id == booking_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self._get_session() as session:
            db_booking = BookingModel(user_id=booking.user_id, room_id=booking.room_id)
            session.add(db_booking)
            try:
                await self._persist(session)
            except IntegrityError as e:
                # booking.user_id is unique: a concurrent request booked first
                raise ForbiddenError('User already has a booking') from e

            db_booking = await self._reload(session, db_booking.id)
            return BookingQueryRepoImpl._to_entity(db_booking)

    @Logger.io
    async def update_room(self, *, booking_id: int, room_id: int) -> Booking:
        async with self._get_session() as session:
            db_booking = await session.get(BookingModel, booking_id)
            if not db_booking:
                raise NotFoundError('Booking not found')

            db_booking.room_id = room_id
            await self._persist(session)

            db_booking = await self._reload(session, booking_id)
            return BookingQueryRepoImpl._to_entity(db_booking)
