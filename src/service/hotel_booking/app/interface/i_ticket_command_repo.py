from abc import ABC, abstractmethod

from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class ITicketCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, ticket: Ticket) -> Ticket:
        pass
