"""
Booking eligibility rules

Each rule looks at a BookingContext and returns an EligibilityFailure or None.
Rules run in the order of their tuple and the first failure wins, so the
tuple order is the order in which a caller sees errors.
"""

from enum import StrEnum
from typing import Callable, Iterable, Optional

import attrs

from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.enrollment_entity import Enrollment
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class FailureKind(StrEnum):
    NOT_FOUND = 'not_found'
    FORBIDDEN = 'forbidden'


class DenialReason(StrEnum):
    ROOM_NOT_FOUND = 'room_not_found'
    ROOM_FULL = 'room_full'
    BOOKING_ALREADY_EXISTS = 'booking_already_exists'
    NO_ENROLLMENT = 'no_enrollment'
    NO_TICKET = 'no_ticket'
    TICKET_NOT_PAID = 'ticket_not_paid'
    TICKET_WITHOUT_HOTEL = 'ticket_without_hotel'
    TICKET_IS_REMOTE = 'ticket_is_remote'
    NO_BOOKING = 'no_booking'
    BOOKING_NOT_OWNED = 'booking_not_owned'


@attrs.frozen
class EligibilityFailure:
    kind: FailureKind
    reason: DenialReason
    message: str


@attrs.frozen
class BookingContext:
    """Everything the rules read. Absent records are None."""

    user_id: int
    room: Optional[Room]
    existing_booking: Optional[Booking] = None
    enrollment: Optional[Enrollment] = None
    ticket: Optional[Ticket] = None
    target_booking_id: Optional[int] = None


Rule = Callable[[BookingContext], Optional[EligibilityFailure]]


def _forbidden(reason: DenialReason, message: str) -> EligibilityFailure:
    return EligibilityFailure(kind=FailureKind.FORBIDDEN, reason=reason, message=message)


def room_must_exist(ctx: BookingContext) -> Optional[EligibilityFailure]:
    if ctx.room is None:
        return EligibilityFailure(
            kind=FailureKind.NOT_FOUND,
            reason=DenialReason.ROOM_NOT_FOUND,
            message='Room not found',
        )
    return None


def room_must_have_vacancy(ctx: BookingContext) -> Optional[EligibilityFailure]:
    if ctx.room is not None and not ctx.room.has_vacancy:
        return _forbidden(DenialReason.ROOM_FULL, 'Room is full')
    return None


def user_must_not_have_booking(ctx: BookingContext) -> Optional[EligibilityFailure]:
    if ctx.existing_booking is not None:
        return _forbidden(DenialReason.BOOKING_ALREADY_EXISTS, 'User already has a booking')
    return None


def user_must_be_enrolled(ctx: BookingContext) -> Optional[EligibilityFailure]:
    if ctx.enrollment is None:
        return _forbidden(DenialReason.NO_ENROLLMENT, 'User has no enrollment')
    return None


def enrollment_must_have_ticket(ctx: BookingContext) -> Optional[EligibilityFailure]:
    if ctx.ticket is None:
        return _forbidden(DenialReason.NO_TICKET, 'User has no ticket')
    return None


def ticket_must_be_paid(ctx: BookingContext) -> Optional[EligibilityFailure]:
    if ctx.ticket is not None and not ctx.ticket.is_paid:
        return _forbidden(DenialReason.TICKET_NOT_PAID, 'Ticket has not been paid')
    return None


def ticket_must_include_hotel(ctx: BookingContext) -> Optional[EligibilityFailure]:
    ticket_type = ctx.ticket.ticket_type if ctx.ticket else None
    if ticket_type is None or not ticket_type.includes_hotel:
        return _forbidden(DenialReason.TICKET_WITHOUT_HOTEL, 'Ticket does not include hotel')
    return None


def ticket_must_not_be_remote(ctx: BookingContext) -> Optional[EligibilityFailure]:
    ticket_type = ctx.ticket.ticket_type if ctx.ticket else None
    if ticket_type is None or ticket_type.is_remote:
        return _forbidden(DenialReason.TICKET_IS_REMOTE, 'Remote tickets cannot book a room')
    return None


def user_must_have_booking(ctx: BookingContext) -> Optional[EligibilityFailure]:
    if ctx.existing_booking is None:
        return _forbidden(DenialReason.NO_BOOKING, 'User has no booking')
    return None


def booking_must_belong_to_user(ctx: BookingContext) -> Optional[EligibilityFailure]:
    booking = ctx.existing_booking
    if booking is None or booking.id != ctx.target_booking_id or not booking.is_owned_by(
        ctx.user_id
    ):
        return _forbidden(DenialReason.BOOKING_NOT_OWNED, 'Booking does not belong to user')
    return None


CREATE_BOOKING_RULES: tuple[Rule, ...] = (
    room_must_exist,
    room_must_have_vacancy,
    user_must_not_have_booking,
    user_must_be_enrolled,
    enrollment_must_have_ticket,
    ticket_must_be_paid,
    ticket_must_include_hotel,
    ticket_must_not_be_remote,
)

UPDATE_BOOKING_RULES: tuple[Rule, ...] = (
    room_must_exist,
    room_must_have_vacancy,
    user_must_have_booking,
    booking_must_belong_to_user,
)


def first_failure(rules: Iterable[Rule], ctx: BookingContext) -> Optional[EligibilityFailure]:
    for rule in rules:
        if (failure := rule(ctx)) is not None:
            return failure
    return None
