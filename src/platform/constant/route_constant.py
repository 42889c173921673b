BOOKING_BASE = '/booking'
TICKET_BASE = '/tickets'

HEALTH = '/health'
METRICS = '/metrics'
