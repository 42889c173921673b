"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.platform.metrics.booking_metrics import metrics
from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.enrollment_query_repo_impl import (
    EnrollmentQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.session_query_repo_impl import (
    SessionQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.ticket_query_repo_impl import (
    TicketQueryRepoImpl,
)
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database session factory
    database = providers.Singleton(Database)

    # Read repositories (stateless - open a session per call)
    # Writes go through the unit of work, see src/platform/database/unit_of_work.py
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    enrollment_query_repo = providers.Singleton(
        EnrollmentQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    session_query_repo = providers.Singleton(
        SessionQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)

    # Prometheus collectors register globally, so hand out the module instance
    booking_metrics = providers.Object(metrics)


container = Container()
