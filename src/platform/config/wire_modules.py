"""
Wire Modules Configuration

Modules whose `Provide[...]` markers the container resolves.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.hotel_booking.app.command import (
    create_booking_use_case,
    create_ticket_use_case,
    update_booking_room_use_case,
)
from src.service.hotel_booking.app.query import (
    get_booking_use_case,
    get_ticket_use_case,
    list_ticket_types_use_case,
)
from src.service.hotel_booking.driving_adapter.http_controller.auth import current_user


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    update_booking_room_use_case,
    create_ticket_use_case,
    get_booking_use_case,
    get_ticket_use_case,
    list_ticket_types_use_case,
    current_user,
]
