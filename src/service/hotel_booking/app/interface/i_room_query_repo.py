from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.room_entity import Room


class IRoomQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, room_id: int, lock: bool = False) -> Optional[Room]:
        """
        Return the room with its current booking count.

        lock=True holds the room row until the surrounding transaction ends,
        so no other transaction can book into it between count and write.
        """
        pass
