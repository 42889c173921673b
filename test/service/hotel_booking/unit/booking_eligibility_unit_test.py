"""
Unit tests for the booking eligibility rules

Rules are pure functions, so these tests build a BookingContext directly.
"""

import pytest

from src.service.hotel_booking.domain.booking_eligibility import (
    CREATE_BOOKING_RULES,
    UPDATE_BOOKING_RULES,
    BookingContext,
    DenialReason,
    FailureKind,
    first_failure,
)
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus


USER_ID = 7


@pytest.fixture
def eligible_create_ctx(room_factory, enrollment_factory, ticket_factory) -> BookingContext:
    return BookingContext(
        user_id=USER_ID,
        room=room_factory(capacity=2, booking_count=1),
        enrollment=enrollment_factory(),
        ticket=ticket_factory(),
    )


@pytest.mark.unit
class TestCreateBookingRules:
    def test_eligible_user_passes(self, eligible_create_ctx: BookingContext) -> None:
        assert first_failure(CREATE_BOOKING_RULES, eligible_create_ctx) is None

    def test_missing_room_is_not_found(self) -> None:
        # Nothing else is loaded: room existence is checked before any ticket rule
        ctx = BookingContext(user_id=USER_ID, room=None)

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.kind == FailureKind.NOT_FOUND
        assert failure.reason == DenialReason.ROOM_NOT_FOUND
        assert failure.message == 'Room not found'

    def test_full_room_is_forbidden_regardless_of_ticket(self, room_factory) -> None:
        ctx = BookingContext(user_id=USER_ID, room=room_factory(capacity=2, booking_count=2))

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.kind == FailureKind.FORBIDDEN
        assert failure.reason == DenialReason.ROOM_FULL

    def test_existing_booking_is_forbidden(
        self, eligible_create_ctx: BookingContext, booking_factory
    ) -> None:
        ctx = BookingContext(
            user_id=USER_ID,
            room=eligible_create_ctx.room,
            existing_booking=booking_factory(),
            enrollment=eligible_create_ctx.enrollment,
            ticket=eligible_create_ctx.ticket,
        )

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.reason == DenialReason.BOOKING_ALREADY_EXISTS

    def test_no_enrollment_is_forbidden(self, room_factory) -> None:
        ctx = BookingContext(user_id=USER_ID, room=room_factory())

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.kind == FailureKind.FORBIDDEN
        assert failure.reason == DenialReason.NO_ENROLLMENT

    def test_no_ticket_is_forbidden(self, room_factory, enrollment_factory) -> None:
        ctx = BookingContext(user_id=USER_ID, room=room_factory(), enrollment=enrollment_factory())

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.reason == DenialReason.NO_TICKET

    def test_reserved_ticket_is_forbidden(
        self, room_factory, enrollment_factory, ticket_factory
    ) -> None:
        ctx = BookingContext(
            user_id=USER_ID,
            room=room_factory(),
            enrollment=enrollment_factory(),
            ticket=ticket_factory(status=TicketStatus.RESERVED),
        )

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.reason == DenialReason.TICKET_NOT_PAID

    def test_ticket_without_hotel_is_forbidden(
        self, room_factory, enrollment_factory, ticket_factory, ticket_type_factory
    ) -> None:
        ctx = BookingContext(
            user_id=USER_ID,
            room=room_factory(),
            enrollment=enrollment_factory(),
            ticket=ticket_factory(ticket_type=ticket_type_factory(includes_hotel=False)),
        )

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.reason == DenialReason.TICKET_WITHOUT_HOTEL

    def test_remote_ticket_is_forbidden(
        self, room_factory, enrollment_factory, ticket_factory, ticket_type_factory
    ) -> None:
        ctx = BookingContext(
            user_id=USER_ID,
            room=room_factory(),
            enrollment=enrollment_factory(),
            ticket=ticket_factory(ticket_type=ticket_type_factory(is_remote=True)),
        )

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.reason == DenialReason.TICKET_IS_REMOTE

    def test_unpaid_ticket_reported_before_hotel_and_remote(
        self, room_factory, enrollment_factory, ticket_factory, ticket_type_factory
    ) -> None:
        ctx = BookingContext(
            user_id=USER_ID,
            room=room_factory(),
            enrollment=enrollment_factory(),
            ticket=ticket_factory(
                status=TicketStatus.RESERVED,
                ticket_type=ticket_type_factory(is_remote=True, includes_hotel=False),
            ),
        )

        failure = first_failure(CREATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.reason == DenialReason.TICKET_NOT_PAID


@pytest.mark.unit
class TestUpdateBookingRules:
    def test_owner_moving_to_free_room_passes(self, room_factory, booking_factory) -> None:
        ctx = BookingContext(
            user_id=USER_ID,
            room=room_factory(room_id=11, capacity=2, booking_count=1),
            existing_booking=booking_factory(booking_id=20),
            target_booking_id=20,
        )

        assert first_failure(UPDATE_BOOKING_RULES, ctx) is None

    def test_missing_room_is_not_found(self) -> None:
        ctx = BookingContext(user_id=USER_ID, room=None, target_booking_id=20)

        failure = first_failure(UPDATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.kind == FailureKind.NOT_FOUND

    def test_full_room_is_forbidden(self, room_factory, booking_factory) -> None:
        ctx = BookingContext(
            user_id=USER_ID,
            room=room_factory(capacity=1, booking_count=1),
            existing_booking=booking_factory(booking_id=20),
            target_booking_id=20,
        )

        failure = first_failure(UPDATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.reason == DenialReason.ROOM_FULL

    def test_user_without_booking_is_forbidden(self, room_factory) -> None:
        # booking 20 exists but belongs to someone else; the caller has none
        ctx = BookingContext(user_id=USER_ID, room=room_factory(), target_booking_id=20)

        failure = first_failure(UPDATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.reason == DenialReason.NO_BOOKING

    def test_booking_id_not_owned_is_forbidden(self, room_factory, booking_factory) -> None:
        ctx = BookingContext(
            user_id=USER_ID,
            room=room_factory(),
            existing_booking=booking_factory(booking_id=20),
            target_booking_id=99,
        )

        failure = first_failure(UPDATE_BOOKING_RULES, ctx)

        assert failure is not None
        assert failure.kind == FailureKind.FORBIDDEN
        assert failure.reason == DenialReason.BOOKING_NOT_OWNED
