from typing import Iterable

from src.platform.exception.exceptions import CustomBaseError, ForbiddenError, NotFoundError
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.hotel_booking.domain.booking_eligibility import (
    BookingContext,
    EligibilityFailure,
    FailureKind,
    Rule,
    first_failure,
)


def failure_to_error(failure: EligibilityFailure) -> CustomBaseError:
    if failure.kind == FailureKind.NOT_FOUND:
        return NotFoundError(failure.message)
    return ForbiddenError(failure.message)


def ensure_eligible(
    *,
    rules: Iterable[Rule],
    ctx: BookingContext,
    operation: str,
    metrics: BookingMetrics,
) -> None:
    """Raise the error of the first failing rule, counting the rejection."""
    failure = first_failure(rules, ctx)
    if failure is None:
        return
    metrics.record_booking_rejected(operation=operation, reason=failure.reason.value)
    raise failure_to_error(failure)
