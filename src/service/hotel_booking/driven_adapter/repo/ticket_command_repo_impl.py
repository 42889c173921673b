from sqlalchemy.exc import IntegrityError

from src.platform.database.session_aware_repo import SessionAwareRepo
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.driven_adapter.model import TicketModel


class TicketCommandRepoImpl(SessionAwareRepo, ITicketCommandRepo):
    @Logger.io
    async def create(self, *, ticket: Ticket) -> Ticket:
        async with self._get_session() as session:
            db_ticket = TicketModel(
                ticket_type_id=ticket.ticket_type_id,
                enrollment_id=ticket.enrollment_id,
                status=ticket.status.value,
            )
            session.add(db_ticket)
            try:
                await self._persist(session)
            except IntegrityError as e:
                # ticket.enrollment_id is unique
                raise ConflictError('A ticket for this enrollment already exists') from e
            await session.refresh(db_ticket)

            return Ticket(
                id=db_ticket.id,
                ticket_type_id=db_ticket.ticket_type_id,
                enrollment_id=db_ticket.enrollment_id,
                status=TicketStatus(db_ticket.status),
                ticket_type=ticket.ticket_type,
                created_at=db_ticket.created_at,
                updated_at=db_ticket.updated_at,
            )
