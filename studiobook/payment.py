"""Pricing booked rooms and taking payment for them."""

from __future__ import annotations

from .booking_manager import BookingManager
from .room_manager import RoomManager
from .users import Role, User


class PaymentError(Exception):
    """Raised when a price cannot be worked out or a payment is refused."""


def _amount(value: float) -> str:
    return f"{value:g}"


class PaymentManager:
    """Works out what a booking costs and settles payment at the desk."""

    def __init__(self, room_manager: RoomManager, booking_manager: BookingManager) -> None:
        self.room_manager = room_manager
        self.booking_manager = booking_manager

    def get_price_for_booked_room(self, room_id: str, booking_id: str) -> float:
        """Return the room's hourly rate times the booked hours."""
        booking = self.booking_manager.get_booking(booking_id)
        if booking is None:
            raise PaymentError(f"Booking {booking_id} not found")
        room = self.room_manager.get_room_by_id(room_id)
        if room is None:
            raise PaymentError(f"Room {room_id} not found")
        return float(room.hourly_rate) * booking.duration_hours()

    def perform_payment(
        self, receptionist: User, user: User, price: float, funds: float
    ) -> str:
        """Take ``price`` from ``funds`` on behalf of ``user``.

        Raises PaymentError when the funds fall short or either party lacks
        the role the operation needs.
        """
        if funds < price:
            raise PaymentError(
                f"Insufficient funds | expected {_amount(price)} got {_amount(funds)}"
            )
        if receptionist.role is not Role.RECEPTIONIST:
            raise PaymentError(
                f"User {receptionist.name} is not the correct role for this operation"
            )
        if user.role is not Role.MUSICIAN:
            raise PaymentError(
                f"User {user.name} is not the correct role for this operation"
            )
        return "Transaction successful"