from typing import Optional

from sqlalchemy import select

from src.platform.database.session_aware_repo import SessionAwareRepo
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_enrollment_query_repo import (
    IEnrollmentQueryRepo,
)
from src.service.hotel_booking.domain.entity.enrollment_entity import Enrollment
from src.service.hotel_booking.driven_adapter.model import EnrollmentModel


class EnrollmentQueryRepoImpl(SessionAwareRepo, IEnrollmentQueryRepo):
    @staticmethod
    def _to_entity(db_enrollment: EnrollmentModel) -> Enrollment:
        return Enrollment(
            id=db_enrollment.id,
            user_id=db_enrollment.user_id,
            name=db_enrollment.name,
            cpf=db_enrollment.cpf,
            birthday=db_enrollment.birthday,
            phone=db_enrollment.phone,
            created_at=db_enrollment.created_at,
            updated_at=db_enrollment.updated_at,
        )

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Enrollment]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EnrollmentModel).where(EnrollmentModel.user_id == user_id)
            )
            db_enrollment = result.scalar_one_or_none()
            return EnrollmentQueryRepoImpl._to_entity(db_enrollment) if db_enrollment else None
