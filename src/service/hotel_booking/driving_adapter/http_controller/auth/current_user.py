from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.service.hotel_booking.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel_booking.domain.entity.user_entity import UserEntity
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


# auto_error=False: a missing header must answer 401, not FastAPI's default 403
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    session_query_repo: ISessionQueryRepo = Depends(Provide[Container.session_query_repo]),
) -> UserEntity:
    token = credentials.credentials if credentials else None
    return await jwt_auth.get_current_user_info_from_jwt(
        token, session_query_repo=session_query_repo
    )
