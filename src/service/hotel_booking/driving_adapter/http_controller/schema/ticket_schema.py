from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CreateTicketRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={'example': {'ticketTypeId': 1}},
    )

    ticket_type_id: int = Field(gt=0)


class TicketTypeResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'Presential with hotel',
                'price': 600,
                'isRemote': False,
                'includesHotel': True,
                'createdAt': '2025-01-10T10:30:00Z',
                'updatedAt': '2025-01-10T10:30:00Z',
            }
        },
    )

    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TicketResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    status: str  # RESERVED / PAID
    ticket_type_id: int
    enrollment_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    ticket_type: TicketTypeResponse = Field(alias='TicketType')
