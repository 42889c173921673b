from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.hotel_booking.app.command.booking_eligibility_guard import ensure_eligible
from src.service.hotel_booking.domain.booking_eligibility import (
    CREATE_BOOKING_RULES,
    BookingContext,
)
from src.service.hotel_booking.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    """
    Book a room for the caller.

    Flow (one transaction):
    1. Lock the room row and count its bookings
    2. Load the caller's booking, enrollment and ticket
    3. Run CREATE_BOOKING_RULES, first failure wins (404 missing room, 403 otherwise)
    4. Insert the booking and commit
    """

    def __init__(self, *, uow: AbstractUnitOfWork, metrics: BookingMetrics) -> None:
        self.uow = uow
        self.metrics = metrics
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(uow=uow, metrics=metrics)

    @Logger.io
    async def execute(self, *, user_id: int, room_id: int) -> Booking:
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'user.id': user_id, 'room.id': room_id},
        ):
            async with self.uow:
                room = await self.uow.room_query_repo.get_by_id(room_id=room_id, lock=True)
                existing_booking = await self.uow.booking_query_repo.get_by_user_id(
                    user_id=user_id
                )
                enrollment = await self.uow.enrollment_query_repo.get_by_user_id(user_id=user_id)
                ticket = (
                    await self.uow.ticket_query_repo.get_by_enrollment_id(
                        enrollment_id=enrollment.id
                    )
                    if enrollment
                    else None
                )

                ensure_eligible(
                    rules=CREATE_BOOKING_RULES,
                    ctx=BookingContext(
                        user_id=user_id,
                        room=room,
                        existing_booking=existing_booking,
                        enrollment=enrollment,
                        ticket=ticket,
                    ),
                    operation='create',
                    metrics=self.metrics,
                )
                assert room is not None  # guaranteed by room_must_exist

                booking = await self.uow.booking_command_repo.create(
                    booking=Booking.create(user_id=user_id, room=room)
                )
                await self.uow.commit()

            self.metrics.record_booking_created(hotel_id=room.hotel_id)
            return booking
