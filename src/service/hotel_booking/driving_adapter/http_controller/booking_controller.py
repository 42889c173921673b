from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.hotel_booking.app.command.update_booking_room_use_case import (
    UpdateBookingRoomUseCase,
)
from src.service.hotel_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.hotel_booking.domain.entity.user_entity import UserEntity
from src.service.hotel_booking.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.hotel_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingIdResponse,
    BookingRequest,
    BookingWithRoomResponse,
    RoomResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_my_booking(
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingWithRoomResponse:
    booking = await use_case.get_by_user_id(user_id=current_user.id)
    if booking.id is None or booking.room is None:
        raise ValueError('Stored booking must carry its id and room.')

    room = booking.room
    return BookingWithRoomResponse(
        id=booking.id,
        room=RoomResponse(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            hotel_id=room.hotel_id,
            created_at=room.created_at,
            updated_at=room.updated_at,
        ),
    )


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: BookingRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingIdResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('room_id', request.room_id)
        span.set_attribute('user_id', current_user.id)

        booking = await use_case.execute(user_id=current_user.id, room_id=request.room_id)
        if booking.id is None:
            raise ValueError('Booking ID should not be None after creation.')

        span.set_attribute('booking.id', booking.id)
        return BookingIdResponse(booking_id=booking.id)


@router.put('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def change_booking_room(
    booking_id: int,
    request: BookingRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateBookingRoomUseCase = Depends(UpdateBookingRoomUseCase.depends),
) -> BookingIdResponse:
    with tracer.start_as_current_span('controller.change_booking_room') as span:
        span.set_attribute('booking.id', booking_id)
        span.set_attribute('room_id', request.room_id)

        booking = await use_case.execute(
            user_id=current_user.id, room_id=request.room_id, booking_id=booking_id
        )
        return BookingIdResponse(booking_id=booking.id or booking_id)
