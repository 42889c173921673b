from prometheus_client import Counter


class BookingMetrics:
    """Business counters for room bookings and ticket reservations"""

    def __init__(self) -> None:
        self.bookings_created = Counter(
            'hotel_bookings_created_total',
            'Bookings created',
            ['hotel_id'],
        )

        self.booking_room_changes = Counter(
            'hotel_booking_room_changes_total',
            'Bookings moved to another room',
            ['hotel_id'],
        )

        self.booking_rejections = Counter(
            'hotel_booking_rejections_total',
            'Booking attempts rejected by an eligibility rule',
            ['operation', 'reason'],  # operation: create/update
        )

        self.tickets_reserved = Counter(
            'tickets_reserved_total',
            'Tickets created in RESERVED status',
            ['ticket_type_id'],
        )

    def record_booking_created(self, *, hotel_id: int) -> None:
        self.bookings_created.labels(hotel_id=hotel_id).inc()

    def record_booking_room_changed(self, *, hotel_id: int) -> None:
        self.booking_room_changes.labels(hotel_id=hotel_id).inc()

    def record_booking_rejected(self, *, operation: str, reason: str) -> None:
        self.booking_rejections.labels(operation=operation, reason=reason).inc()

    def record_ticket_reserved(self, *, ticket_type_id: int) -> None:
        self.tickets_reserved.labels(ticket_type_id=ticket_type_id).inc()


# Global metrics instance
metrics = BookingMetrics()
