from enum import StrEnum


class TicketStatus(StrEnum):
    RESERVED = 'RESERVED'
    PAID = 'PAID'
