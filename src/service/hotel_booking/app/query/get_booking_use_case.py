from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Booking:
        """Return the user's booking together with its room."""
        booking = await self.booking_query_repo.get_by_user_id(user_id=user_id)
        if booking is None:
            Logger.base.warning(f'⚠️ [GET_BOOKING] User {user_id} has no booking')
            raise NotFoundError('Booking not found')
        return booking
