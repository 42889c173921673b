from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus


@attrs.define
class TicketType:
    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class Ticket:
    ticket_type_id: int
    enrollment_id: int
    status: TicketStatus = TicketStatus.RESERVED
    id: Optional[int] = None
    ticket_type: Optional[TicketType] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def reserve(cls, *, enrollment_id: int, ticket_type: TicketType) -> 'Ticket':
        """A new ticket always starts RESERVED; payment moves it to PAID elsewhere."""
        now = datetime.now(timezone.utc)
        return cls(
            ticket_type_id=ticket_type.id,
            enrollment_id=enrollment_id,
            status=TicketStatus.RESERVED,
            ticket_type=ticket_type,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_paid(self) -> bool:
        return self.status == TicketStatus.PAID
