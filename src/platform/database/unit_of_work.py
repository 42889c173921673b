"""
Unit of Work Pattern - one database transaction shared by the repositories of a use case

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories created by the UoW share its session
- Leaving the ``async with`` block without commit rolls back
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.hotel_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.hotel_booking.app.interface.i_enrollment_query_repo import (
        IEnrollmentQueryRepo,
    )
    from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
    from src.service.hotel_booking.app.interface.i_ticket_command_repo import ITicketCommandRepo
    from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            room = await uow.room_query_repo.get_by_id(room_id=1, lock=True)
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.commit()
    """

    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo
    room_query_repo: IRoomQueryRepo
    enrollment_query_repo: IEnrollmentQueryRepo
    ticket_command_repo: ITicketCommandRepo
    ticket_query_repo: ITicketQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.hotel_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.enrollment_query_repo_impl import (
            EnrollmentQueryRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.room_query_repo_impl import (
            RoomQueryRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.ticket_command_repo_impl import (
            TicketCommandRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.ticket_query_repo_impl import (
            TicketQueryRepoImpl,
        )

        self.booking_command_repo = BookingCommandRepoImpl()
        self.booking_query_repo = BookingQueryRepoImpl()
        self.room_query_repo = RoomQueryRepoImpl()
        self.enrollment_query_repo = EnrollmentQueryRepoImpl()
        self.ticket_command_repo = TicketCommandRepoImpl()
        self.ticket_query_repo = TicketQueryRepoImpl()

        for repo in (
            self.booking_command_repo,
            self.booking_query_repo,
            self.room_query_repo,
            self.enrollment_query_repo,
            self.ticket_command_repo,
            self.ticket_query_repo,
        ):
            repo.session = self.session

        return await super().__aenter__()

    async def _commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """FastAPI dependency for Unit of Work"""
    return SqlAlchemyUnitOfWork(session)
