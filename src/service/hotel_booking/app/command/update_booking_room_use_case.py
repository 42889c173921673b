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
    UPDATE_BOOKING_RULES,
    BookingContext,
)
from src.service.hotel_booking.domain.entity.booking_entity import Booking


class UpdateBookingRoomUseCase:
    """
    Move the caller's booking to another room.

    Ticket rules are not re-checked: they held when the booking was created.
    The target room's count includes the caller's own booking, so "moving"
    into the current room of a full room is refused like any other full room.
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
    async def execute(self, *, user_id: int, room_id: int, booking_id: int) -> Booking:
        with self.tracer.start_as_current_span(
            'use_case.update_booking_room',
            attributes={'user.id': user_id, 'room.id': room_id, 'booking.id': booking_id},
        ):
            async with self.uow:
                room = await self.uow.room_query_repo.get_by_id(room_id=room_id, lock=True)
                existing_booking = await self.uow.booking_query_repo.get_by_user_id(
                    user_id=user_id
                )

                ensure_eligible(
                    rules=UPDATE_BOOKING_RULES,
                    ctx=BookingContext(
                        user_id=user_id,
                        room=room,
                        existing_booking=existing_booking,
                        target_booking_id=booking_id,
                    ),
                    operation='update',
                    metrics=self.metrics,
                )
                assert room is not None  # guaranteed by room_must_exist

                booking = await self.uow.booking_command_repo.update_room(
                    booking_id=booking_id, room_id=room.id
                )
                await self.uow.commit()

            self.metrics.record_booking_room_changed(hotel_id=room.hotel_id)
            return booking
