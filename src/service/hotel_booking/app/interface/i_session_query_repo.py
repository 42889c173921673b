from abc import ABC, abstractmethod


class ISessionQueryRepo(ABC):
    @abstractmethod
    async def exists(self, *, user_id: int, token: str) -> bool:
        """True while a login session for this user still holds the token"""
        pass
