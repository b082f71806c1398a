"""Set up the studio's rooms and show what they hold."""

from __future__ import annotations

import argparse
import sys

from .booking_manager import BookingManager
from .equipment import (
    AdvancedLightingSystem,
    AdvancedSoundSystem,
    BasicLightingSystem,
    BasicSoundSystem,
    ElectricBassAmp,
    ElectricGuitarAmp,
    Microphone,
    Piano,
    SmallDrums,
    StandardDrums,
    Stage,
    Synthesizer,
)
from .room_manager import RoomManager
from .rooms import (
    BandRoom,
    RecordingRoom,
    SmallDrumRoom,
    SoloDuoRoom,
    StandardDrumRoom,
    make_room,
)
from .users import User


def create_rooms(room_manager: RoomManager) -> list[str]:
    """Add the studio's standard set of rooms and return their ids."""
    recording = [
        make_room(RecordingRoom, 1, BasicSoundSystem, Microphone, SmallDrums)
        for _ in range(3)
    ]
    drums = [
        make_room(SmallDrumRoom, 1, BasicSoundSystem, SmallDrums),
        make_room(SmallDrumRoom, 1, BasicSoundSystem, SmallDrums),
        make_room(StandardDrumRoom, 2, BasicSoundSystem, StandardDrums),
    ]
    solo_duo = [
        make_room(SoloDuoRoom, 2, BasicSoundSystem, ElectricGuitarAmp, SmallDrums),
        make_room(SoloDuoRoom, 2, BasicSoundSystem, ElectricBassAmp, SmallDrums),
    ]
    four_person = (
        BasicSoundSystem, Microphone, Microphone, ElectricGuitarAmp,
        ElectricGuitarAmp, ElectricBassAmp, StandardDrums, Piano,
    )
    band = [
        make_room(
            BandRoom, 3, BasicSoundSystem, Microphone, ElectricGuitarAmp,
            ElectricBassAmp, SmallDrums, Piano,
        ),
        make_room(BandRoom, 4, *four_person),
        make_room(BandRoom, 4, *four_person),
        make_room(
            BandRoom, 6, BasicSoundSystem, BasicLightingSystem, Microphone,
            Microphone, ElectricGuitarAmp, ElectricGuitarAmp, ElectricBassAmp,
            ElectricBassAmp, StandardDrums, Synthesizer, Piano,
        ),
        make_room(
            BandRoom, 10, AdvancedSoundSystem, AdvancedLightingSystem, Stage,
            Microphone, Microphone, ElectricGuitarAmp, ElectricGuitarAmp,
            ElectricBassAmp, ElectricBassAmp, StandardDrums, StandardDrums,
            Synthesizer, Synthesizer, Piano,
        ),
    ]
    return room_manager.add_rooms(*recording, *drums, *solo_duo, *band)


def user_booking_example(
    room_manager: RoomManager, booking_manager: BookingManager
) -> str | None:
    """Book the first recording room, move the booking, and print both states.

    Returns the booking id, or None when no recording room is free.
    """
    user = User("John", "Doe", "john.doe@example.com")
    room = room_manager.get_room(RecordingRoom)
    if room is None or not room.available:
        print("Room not available")
        return None
    booking_id = booking_manager.create_booking(user, "16:00", "18:00", room.id, 1)
    print(booking_manager.booking_information(booking_id))
    booking_manager.modify_booking(booking_id, user, "12:00", "14:00", room.id, 1)
    print(booking_manager.booking_information(booking_id))
    return booking_id


def main(argv: list[str] | None = None) -> int:
    """Create the rooms, print their details and wait for a line of input."""
    parser = argparse.ArgumentParser(
        prog="studiobook",
        description="List the rooms of the studio and the equipment in each.",
    )
    parser.parse_args(argv)
    room_manager = RoomManager()
    create_rooms(room_manager)
    room_manager.print_all_room_details()
    sys.stdin.readline()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())