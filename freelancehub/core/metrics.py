"""
Prometheus counters for marketplace activity (exposed at /metrics).
"""

from prometheus_client import Counter

REGISTRATIONS = Counter(
    "freelancehub_registrations_total",
    "Users registered",
    ["user_type"],
)

BOOKINGS_CREATED = Counter(
    "freelancehub_bookings_created_total",
    "Bookings placed by clients",
)

BOOKING_TRANSITIONS = Counter(
    "freelancehub_booking_transitions_total",
    "Booking status changes",
    ["status"],
)
