"""Creating, changing, cancelling and checking in and out of bookings."""

from __future__ import annotations

import re

from .booking import Booking
from .ids import epoch_from_time_string, generate_uuid_v4
from .room_manager import RoomManager
from .rooms import Room
from .users import Role, User

_TIME_24H = re.compile(r"(?:[01][0-9]|2[0-3]):[0-5][0-9]")
_CANCEL_NOTICE_SECONDS = 12 * 60 * 60
_LATE_AFTER_SECONDS = 600


class BookingError(Exception):
    """Raised when a booking operation is refused."""


def _require_role(user: User, role: Role) -> None:
    if user.role is not role:
        raise BookingError(
            f"User {user.name} does not have the required role for this operation"
        )


class BookingManager:
    """Keeps the studio's bookings and checks them against the rooms."""

    def __init__(self, room_manager: RoomManager) -> None:
        self.room_manager = room_manager
        self._bookings: dict[str, Booking] = {}

    def _validate(
        self, user: User | None, start_time: str, end_time: str, room_id: str, size: int
    ) -> Room:
        room = self.room_manager.get_room_by_id(room_id)
        if room is None:
            raise BookingError(f"Room {room_id} does not exist")
        if not _TIME_24H.fullmatch(start_time):
            raise BookingError(f"Invalid start time : {start_time}")
        if not _TIME_24H.fullmatch(end_time):
            raise BookingError(f"Invalid end time : {end_time}")
        if size <= 0 or size > room.max_capacity:
            raise BookingError(f"Invalid size : {size}, must 1 - {room.max_capacity}")
        if user is None:
            raise BookingError("User has not been created")
        return room

    def _booking(self, booking_id: str) -> Booking:
        try:
            return self._bookings[booking_id]
        except KeyError:
            raise BookingError(f"Booking {booking_id} not found") from None

    def create_booking(
        self, user: User | None, start_time: str, end_time: str, room_id: str, size: int
    ) -> str:
        """Book ``room_id`` for ``user`` and return the new booking's id."""
        self._validate(user, start_time, end_time, room_id, size)
        booking_id = generate_uuid_v4()
        self._bookings[booking_id] = Booking(
            user, start_time, end_time, room_id, size, id=booking_id
        )
        return booking_id

    def modify_booking(
        self,
        booking_id: str,
        user: User | None,
        start_time: str,
        end_time: str,
        room_id: str,
        size: int,
    ) -> str:
        """Change an existing booking after the same checks as creation."""
        self._validate(user, start_time, end_time, room_id, size)
        self._booking(booking_id).modify(user, start_time, end_time, room_id, size)
        return booking_id

    def cancel_booking(
        self, booking_id: str, user: User, receptionist: User, current_time: str
    ) -> None:
        """Cancel a booking; refused with less than twelve hours between the times."""
        booking = self._booking(booking_id)
        _require_role(user, Role.MUSICIAN)
        _require_role(receptionist, Role.RECEPTIONIST)
        difference = epoch_from_time_string(current_time) - epoch_from_time_string(
            booking.start_time
        )
        if difference < _CANCEL_NOTICE_SECONDS:
            raise BookingError("Bookings cannot be cancelled within less than 12 hours")
        del self._bookings[booking_id]

    def check_in_user(
        self,
        user: User,
        receptionist: User,
        booking_id: str,
        room_id: str,
        current_time: str,
    ) -> None:
        """Check ``user`` into the booked room, marking the room unavailable."""
        booking = self._booking(booking_id)
        room = self.room_manager.get_room_by_id(room_id)
        if room is None:
            raise BookingError(f"Room {room_id} not found")
        if booking.room_id != room_id:
            raise BookingError(
                f"Wrong check in for {user.name}, has booked room {booking.room_id} "
                f"but trying to access room {room_id}"
            )
        _require_role(receptionist, Role.RECEPTIONIST)
        _require_role(user, Role.MUSICIAN)
        lateness = epoch_from_time_string(current_time) - epoch_from_time_string(
            booking.start_time
        )
        if lateness > _LATE_AFTER_SECONDS:
            raise BookingError(f"User {booking_id} is late by {lateness} seconds")
        if not room.available:
            raise BookingError(f"Room {room_id} not available")
        room.available = False
        booking.checked_in = True
        booking.check_in_time = current_time

    def check_out_user(
        self,
        user: User,
        receptionist: User,
        booking_id: str,
        room_id: str,
        current_time: str,
    ) -> None:
        """Check ``user`` out, making the room available again."""
        booking = self._booking(booking_id)
        if not booking.checked_in:
            raise BookingError(f"User {user.name} did not check in!")
        _require_role(receptionist, Role.RECEPTIONIST)
        _require_role(user, Role.MUSICIAN)
        room = self.room_manager.get_room_by_id(room_id)
        if room is None:
            raise BookingError(f"Room {room_id} not found")
        room.available = True
        booking.checked_in = False

    def get_booking_for_user(self, user: User | None) -> Booking | None:
        """Return the first booking made by ``user``, or None."""
        return next((b for b in self._bookings.values() if b.user is user), None)

    def remove_booking(self, booking_id: str) -> None:
        """Forget a booking; unknown ids are ignored."""
        self._bookings.pop(booking_id, None)

    def get_booking(self, booking_id: str) -> Booking | None:
        """Return the booking with ``booking_id``, or None."""
        return self._bookings.get(booking_id)

    def booking_information(self, booking_id: str) -> str:
        """Describe a booking; KeyError if there is none with that id."""
        return self._bookings[booking_id].information()

    def clear(self) -> None:
        """Remove every booking."""
        self._bookings.clear()

    def __len__(self) -> int:
        return len(self._bookings)