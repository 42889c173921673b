from typing import Optional

from sqlalchemy import func, select

from src.platform.database.session_aware_repo import SessionAwareRepo
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.driven_adapter.model import BookingModel, RoomModel


class RoomQueryRepoImpl(SessionAwareRepo, IRoomQueryRepo):
    @staticmethod
    def _to_entity(db_room: RoomModel, *, booking_count: int) -> Room:
        return Room(
            id=db_room.id,
            name=db_room.name,
            capacity=db_room.capacity,
            hotel_id=db_room.hotel_id,
            booking_count=booking_count,
            created_at=db_room.created_at,
            updated_at=db_room.updated_at,
        )

    @Logger.io
    async def get_by_id(self, *, room_id: int, lock: bool = False) -> Optional[Room]:
        async with self._get_session() as session:
            query = select(RoomModel).where(RoomModel.id == room_id)
            if lock:
                query = query.with_for_update()
            result = await session.execute(query)
            db_room = result.scalar_one_or_none()

            if not db_room:
                return None

            # Counted after the row lock so the number cannot change before our write
            booking_count = await session.scalar(
                select(func.count(BookingModel.id)).where(BookingModel.room_id == room_id)
            )
            return RoomQueryRepoImpl._to_entity(db_room, booking_count=booking_count or 0)
