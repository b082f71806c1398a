"""Rooms, equipment, users, bookings and payments for a music rehearsal studio."""

__version__ = "0.1.0"
__all__ = [
    "booking",
    "booking_manager",
    "cli",
    "equipment",
    "ids",
    "payment",
    "room_manager",
    "rooms",
    "users",
]