from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        """Return the user's booking with its room loaded, or None"""
        pass
