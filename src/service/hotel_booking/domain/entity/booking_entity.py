from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.domain.entity.room_entity import Room


@attrs.define
class Booking:
    user_id: int
    room_id: int
    id: Optional[int] = None
    room: Optional[Room] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, user_id: int, room: Room) -> 'Booking':
        now = datetime.now(timezone.utc)
        return cls(
            user_id=user_id,
            room_id=room.id,
            room=room,
            created_at=now,
            updated_at=now,
        )

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id
