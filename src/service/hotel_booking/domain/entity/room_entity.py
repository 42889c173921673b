from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Room:
    id: int
    name: str
    capacity: int
    hotel_id: int
    booking_count: int = 0  # Derived from booking rows, never stored on the room
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def has_vacancy(self) -> bool:
        return self.booking_count < self.capacity
