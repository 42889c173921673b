from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.enrollment_entity import Enrollment


class IEnrollmentQueryRepo(ABC):
    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> Optional[Enrollment]:
        pass
