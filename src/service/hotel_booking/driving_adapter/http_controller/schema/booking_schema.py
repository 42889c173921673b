from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingRequest(_CamelModel):
    model_config = ConfigDict(json_schema_extra={'example': {'roomId': 1}})

    room_id: int = Field(gt=0)


class BookingIdResponse(_CamelModel):
    model_config = ConfigDict(json_schema_extra={'example': {'bookingId': 1}})

    booking_id: int


class RoomResponse(_CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingWithRoomResponse(_CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'Room': {
                    'id': 3,
                    'name': '101',
                    'capacity': 2,
                    'hotelId': 1,
                    'createdAt': '2025-01-10T10:30:00Z',
                    'updatedAt': '2025-01-10T10:30:00Z',
                },
            }
        },
    )

    id: int
    room: RoomResponse = Field(alias='Room')
