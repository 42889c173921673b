from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from src.platform.database.session_aware_repo import SessionAwareRepo
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.driven_adapter.model import BookingModel, RoomModel


class BookingQueryRepoImpl(SessionAwareRepo, IBookingQueryRepo):
    @staticmethod
    def _room_to_entity(db_room: RoomModel) -> Room:
        return Room(
            id=db_room.id,
            name=db_room.name,
            capacity=db_room.capacity,
            hotel_id=db_room.hotel_id,
            created_at=db_room.created_at,
            updated_at=db_room.updated_at,
        )

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            room_id=db_booking.room_id,
            room=BookingQueryRepoImpl._room_to_entity(db_booking.room),
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .options(selectinload(BookingModel.room))
                .where(BookingModel.user_id == user_id)
            )
            db_booking = result.scalar_one_or_none()

            if not db_booking:
                return None

            return BookingQueryRepoImpl._to_entity(db_booking)
