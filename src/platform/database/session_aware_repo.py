from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.ext.asyncio import AsyncSession


class SessionAwareRepo:
    """
    Base for SQLAlchemy repositories.

    A repository runs either on its own short-lived session taken from
    ``session_factory``, or on the session injected by a unit of work. In the
    second case the unit of work owns commit and rollback.
    """

    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @property
    def in_unit_of_work(self) -> bool:
        return self.session is not None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    async def _persist(self, session: AsyncSession) -> None:
        """Flush pending writes; commit only when no unit of work owns the session."""
        await session.flush()
        if not self.in_unit_of_work:
            await session.commit()
