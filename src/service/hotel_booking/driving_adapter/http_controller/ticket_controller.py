from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.hotel_booking.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.hotel_booking.app.query.list_ticket_types_use_case import ListTicketTypesUseCase
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket, TicketType
from src.service.hotel_booking.domain.entity.user_entity import UserEntity
from src.service.hotel_booking.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.hotel_booking.driving_adapter.http_controller.schema.ticket_schema import (
    CreateTicketRequest,
    TicketResponse,
    TicketTypeResponse,
)


router = APIRouter()


def _ticket_type_response(ticket_type: TicketType) -> TicketTypeResponse:
    return TicketTypeResponse(
        id=ticket_type.id,
        name=ticket_type.name,
        price=ticket_type.price,
        is_remote=ticket_type.is_remote,
        includes_hotel=ticket_type.includes_hotel,
        created_at=ticket_type.created_at,
        updated_at=ticket_type.updated_at,
    )


def _ticket_response(ticket: Ticket) -> TicketResponse:
    if ticket.id is None or ticket.ticket_type is None:
        raise ValueError('Stored ticket must carry its id and ticket type.')
    return TicketResponse(
        id=ticket.id,
        status=ticket.status.value,
        ticket_type_id=ticket.ticket_type_id,
        enrollment_id=ticket.enrollment_id,
        created_at=ticket.created_at,
        updated_at=ticket.updated_at,
        ticket_type=_ticket_type_response(ticket.ticket_type),
    )


# Declared before any path parameter route so '/types' is never captured by one
@router.get('/types', status_code=status.HTTP_200_OK)
@Logger.io
async def list_ticket_types(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListTicketTypesUseCase = Depends(ListTicketTypesUseCase.depends),
) -> List[TicketTypeResponse]:
    return [_ticket_type_response(ticket_type) for ticket_type in await use_case.list_all()]


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_my_ticket(
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    return _ticket_response(await use_case.get_by_user_id(user_id=current_user.id))


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket(
    request: CreateTicketRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateTicketUseCase = Depends(CreateTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(
        user_id=current_user.id, ticket_type_id=request.ticket_type_id
    )
    return _ticket_response(ticket)
