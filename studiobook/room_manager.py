"""A registry of the studio's rooms, keyed by room identifier."""

from __future__ import annotations

import sys
from typing import TextIO, TypeVar

from .rooms import Room

R = TypeVar("R", bound=Room)


class RoomLimitError(Exception):
    """Raised when a room type already has as many rooms as it may have."""


def _check_room_type(room_type: type) -> None:
    if not (isinstance(room_type, type) and issubclass(room_type, Room)):
        raise TypeError(f"{room_type!r} is not a room type")


class RoomManager:
    """Holds every room of the studio, looked up by id or by type."""

    def __init__(self) -> None:
        self._rooms: dict[str, Room] = {}

    def _ordered(self):
        return (room for _, room in sorted(self._rooms.items()))

    def _matching(self, room_type: type[R], capacity: int | None):
        _check_room_type(room_type)
        return (
            room
            for room in self._ordered()
            if isinstance(room, room_type)
            and (capacity is None or room.max_capacity == capacity)
        )

    def count_rooms_of_type(self, room_type: type[Room], capacity: int | None = None) -> int:
        """Count the rooms of ``room_type``, optionally only those of ``capacity``."""
        return sum(1 for _ in self._matching(room_type, capacity))

    def add_rooms(self, *args: Room) -> list[str]:
        """Add every room given and return their ids in order."""
        return [self.add_room(room) for room in args]

    def add_room(self, room: Room) -> str:
        """Store an existing room under its own id and return that id."""
        self._rooms[room.id] = room
        return room.id

    def create_room(self, room_type: type[Room], capacity: int) -> str:
        """Create a ``room_type`` of ``capacity`` and return its id.

        Raises RoomLimitError when that type and capacity is already at its limit.
        """
        _check_room_type(room_type)
        room = room_type(capacity)
        if self.count_rooms_of_type(room_type, capacity) >= room.max_room_count:
            raise RoomLimitError("Too many rooms")
        return self.add_room(room)

    def get_room(self, room_type: type[R], capacity: int | None = None) -> R | None:
        """Return the first room of ``room_type`` (and ``capacity``), or None."""
        return next(self._matching(room_type, capacity), None)

    def get_all_rooms(self, room_type: type[R], capacity: int | None = None) -> list[R]:
        """Return every room of ``room_type``, optionally only those of ``capacity``."""
        return list(self._matching(room_type, capacity))

    def remove_room(self, room_id: str) -> None:
        """Forget the room with ``room_id``; unknown ids are ignored."""
        self._rooms.pop(room_id, None)

    def get_room_by_id(self, room_id: str) -> Room | None:
        """Return the room with ``room_id``, or None."""
        return self._rooms.get(room_id)

    def clear(self) -> None:
        """Remove every room."""
        self._rooms.clear()

    def print_all_room_details(self, file: TextIO | None = None) -> None:
        """Write the details of every room, each followed by a blank line."""
        out = sys.stdout if file is None else file
        for room in self._ordered():
            print(room.details(), end="\n\n", file=out)

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self):
        return self._ordered()