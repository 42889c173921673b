from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from src.platform.database.session_aware_repo import SessionAwareRepo
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket, TicketType
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.driven_adapter.model import TicketModel, TicketTypeModel


class TicketQueryRepoImpl(SessionAwareRepo, ITicketQueryRepo):
    @staticmethod
    def _ticket_type_to_entity(db_ticket_type: TicketTypeModel) -> TicketType:
        return TicketType(
            id=db_ticket_type.id,
            name=db_ticket_type.name,
            price=db_ticket_type.price,
            is_remote=db_ticket_type.is_remote,
            includes_hotel=db_ticket_type.includes_hotel,
            created_at=db_ticket_type.created_at,
            updated_at=db_ticket_type.updated_at,
        )

    @staticmethod
    def _to_entity(db_ticket: TicketModel) -> Ticket:
        return Ticket(
            id=db_ticket.id,
            ticket_type_id=db_ticket.ticket_type_id,
            enrollment_id=db_ticket.enrollment_id,
            status=TicketStatus(db_ticket.status),
            ticket_type=TicketQueryRepoImpl._ticket_type_to_entity(db_ticket.ticket_type),
            created_at=db_ticket.created_at,
            updated_at=db_ticket.updated_at,
        )

    @Logger.io
    async def get_ticket_type_by_id(self, *, ticket_type_id: int) -> Optional[TicketType]:
        async with self._get_session() as session:
            db_ticket_type = await session.get(TicketTypeModel, ticket_type_id)
            if not db_ticket_type:
                return None
            return TicketQueryRepoImpl._ticket_type_to_entity(db_ticket_type)

    @Logger.io
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketModel)
                .options(selectinload(TicketModel.ticket_type))
                .where(TicketModel.enrollment_id == enrollment_id)
            )
            db_ticket = result.scalar_one_or_none()
            return TicketQueryRepoImpl._to_entity(db_ticket) if db_ticket else None

    @Logger.io
    async def list_ticket_types(self) -> List[TicketType]:
        async with self._get_session() as session:
            result = await session.execute(select(TicketTypeModel).order_by(TicketTypeModel.id))
            return [
                TicketQueryRepoImpl._ticket_type_to_entity(db_ticket_type)
                for db_ticket_type in result.scalars().all()
            ]
