from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel_booking.domain.entity.ticket_entity import TicketType


class ListTicketTypesUseCase:
    def __init__(self, ticket_query_repo: ITicketQueryRepo) -> None:
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def list_all(self) -> List[TicketType]:
        return await self.ticket_query_repo.list_ticket_types()
