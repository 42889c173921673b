from sqlalchemy import select

from src.platform.database.session_aware_repo import SessionAwareRepo
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel_booking.driven_adapter.model import SessionModel


class SessionQueryRepoImpl(SessionAwareRepo, ISessionQueryRepo):
    @Logger.io
    async def exists(self, *, user_id: int, token: str) -> bool:
        async with self._get_session() as session:
            session_id = await session.scalar(
                select(SessionModel.id)
                .where(SessionModel.user_id == user_id, SessionModel.token == token)
                .limit(1)
            )
            return session_id is not None
