from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.hotel_booking.domain.entity.ticket_entity import Ticket, TicketType


class ITicketQueryRepo(ABC):
    """Repository interface for ticket and ticket type reads"""

    @abstractmethod
    async def get_ticket_type_by_id(self, *, ticket_type_id: int) -> Optional[TicketType]:
        pass

    @abstractmethod
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        """Return the enrollment's ticket with its ticket type loaded, or None"""
        pass

    @abstractmethod
    async def list_ticket_types(self) -> List[TicketType]:
        pass
