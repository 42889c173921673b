from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class CreateTicketUseCase:
    """Reserve a ticket of the given type for the caller's enrollment (one per enrollment)."""

    def __init__(self, *, uow: AbstractUnitOfWork, metrics: BookingMetrics) -> None:
        self.uow = uow
        self.metrics = metrics

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(uow=uow, metrics=metrics)

    @Logger.io
    async def execute(self, *, user_id: int, ticket_type_id: int) -> Ticket:
        async with self.uow:
            ticket_type = await self.uow.ticket_query_repo.get_ticket_type_by_id(
                ticket_type_id=ticket_type_id
            )
            if not ticket_type:
                raise NotFoundError('Ticket type not found')

            enrollment = await self.uow.enrollment_query_repo.get_by_user_id(user_id=user_id)
            if not enrollment:
                raise NotFoundError('Enrollment not found')

            if await self.uow.ticket_query_repo.get_by_enrollment_id(enrollment_id=enrollment.id):
                raise ConflictError('A ticket for this enrollment already exists')

            ticket = await self.uow.ticket_command_repo.create(
                ticket=Ticket.reserve(enrollment_id=enrollment.id, ticket_type=ticket_type)
            )
            await self.uow.commit()

        self.metrics.record_ticket_reserved(ticket_type_id=ticket_type.id)
        return ticket
