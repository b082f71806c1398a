"""A single booking of a room by a user."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .users import User

_CLOCK = re.compile(r"\s*([+-]?\d+)\s*\S\s*([+-]?\d+)")


def _minutes(text: str) -> int:
    match = _CLOCK.match(text)
    if match is None:
        raise ValueError(f"invalid time of day: {text!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


@dataclass(eq=False)
class Booking:
    """A room held for a user between two ``HH:MM`` times."""

    user: User
    start_time: str
    end_time: str
    room_id: str
    size: int
    id: str = ""
    checked_in: bool = False
    check_in_time: str = ""

    def modify(self, user: User, start_time: str, end_time: str, room_id: str, size: int) -> None:
        """Replace the user, times, room and size of the booking."""
        self.user = user
        self.start_time = start_time
        self.end_time = end_time
        self.room_id = room_id
        self.size = size

    def duration_hours(self) -> float:
        """Hours between the start and end times."""
        return (_minutes(self.end_time) - _minutes(self.start_time)) / 60.0

    def information(self) -> str:
        """Describe the booking in one sentence."""
        return (
            f"Room {self.room_id} has been booked from {self.start_time} - "
            f"{self.end_time} for {self.user.name} for {self.size} people"
        )