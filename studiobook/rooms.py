"""Rehearsal and recording rooms and the equipment they hold."""

from __future__ import annotations

from enum import IntEnum
from typing import TypeVar

from .equipment import Equipment
from .ids import generate_uuid_v4

E = TypeVar("E", bound=Equipment)
R = TypeVar("R", bound="Room")


class Room:
    """A bookable room with a capacity, an hourly rate and its equipment."""

    description: str = ""
    max_room_count: int = 5

    def __init__(self, max_capacity: int, hourly_rate: int) -> None:
        self.id = generate_uuid_v4()
        self.max_capacity = max_capacity
        self.hourly_rate = hourly_rate
        self.available = True
        self.equipment: dict[str, Equipment] = {}

    def add_equipment(self, equipment_type: type[E]) -> E:
        """Create one piece of ``equipment_type`` in this room and return it."""
        if not (isinstance(equipment_type, type) and issubclass(equipment_type, Equipment)):
            raise TypeError(f"{equipment_type!r} is not an equipment type")
        item = equipment_type()
        self.equipment[generate_uuid_v4()] = item
        return item

    def count_equipment(self, equipment_type: type[Equipment]) -> int:
        """Count the pieces that are instances of ``equipment_type``."""
        return sum(isinstance(item, equipment_type) for item in self.equipment.values())

    def details(self) -> str:
        """Describe the room and list its equipment, one line per piece."""
        header = (
            f"Room {self.id} - max size {self.max_capacity} people - "
            f"{self.hourly_rate}$/hr - Equipment list: \n"
        )
        lines = (f"{item.information}\n" for _, item in sorted(self.equipment.items()))
        return header + "".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_capacity={self.max_capacity}, id={self.id!r})"


class RecordingRoom(Room):
    BASE_HOURLY_RATE = 10
    description = "Basic recording room"
    max_room_count = 3

    def __init__(self, max_capacity: int) -> None:
        super().__init__(max_capacity, self.BASE_HOURLY_RATE)


class DrumRoom(Room):
    """A room meant for drummers."""


class SmallDrumRoom(DrumRoom):
    BASE_HOURLY_RATE = 15
    description = "Small Drum Room"
    max_room_count = 2

    def __init__(self, max_capacity: int) -> None:
        super().__init__(max_capacity, self.BASE_HOURLY_RATE)


class StandardDrumRoom(DrumRoom):
    BASE_HOURLY_RATE = 20
    description = "Standard Drum Room"
    max_room_count = 1

    def __init__(self, max_capacity: int) -> None:
        super().__init__(max_capacity, self.BASE_HOURLY_RATE)


class SoloDuoRoom(Room):
    BASE_HOURLY_RATE = 20
    description = "Solo or duo room"
    max_room_count = 2

    def __init__(self, max_capacity: int) -> None:
        super().__init__(max_capacity, self.BASE_HOURLY_RATE)


class BandRoomSize(IntEnum):
    THREE_PERSON_BAND_ROOM = 3
    FOUR_PERSON_BAND_ROOM = 4
    SIX_PERSON_BAND_ROOM = 6
    TEN_PERSON_BAND_ROOM = 10


_BAND_ROOM_LIMITS = {
    BandRoomSize.THREE_PERSON_BAND_ROOM: 1,
    BandRoomSize.FOUR_PERSON_BAND_ROOM: 2,
    BandRoomSize.SIX_PERSON_BAND_ROOM: 1,
    BandRoomSize.TEN_PERSON_BAND_ROOM: 1,
}


class BandRoom(Room):
    """A band room whose rate grows with its size; only set sizes may exist."""

    BASE_HOURLY_RATE = 20
    ADDITIONAL_PER_PERSON_COST = 5

    def __init__(self, max_capacity: int) -> None:
        super().__init__(
            max_capacity,
            self.BASE_HOURLY_RATE + self.ADDITIONAL_PER_PERSON_COST * max_capacity,
        )
        self.max_room_count = _BAND_ROOM_LIMITS.get(max_capacity, 0)


def make_room(room_type: type[R], max_size: int, *args: type[Equipment]) -> R:
    """Build a ``room_type`` of ``max_size`` holding one of each equipment type given."""
    room = room_type(max_size)
    for equipment_type in args:
        room.add_equipment(equipment_type)
    return room