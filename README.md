# studiobook

Studiobook models a music rehearsal studio. It tracks:

- the studio's rooms and the equipment in each room
- bookings of those rooms
- check-in and check-out at the front desk
- payment for a booking

Everything is held in memory.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
studiobook
```

This command sets up the studio's standard room layout. For every room it
prints:

- the room's identifier
- how many people the room holds
- its hourly rate
- its equipment, one line per piece

The layout has:

- three recording rooms
- two small drum rooms and one standard drum room
- two solo/duo rooms
- band rooms for 3 people, for 4 people (two rooms), for 6 people and for
  10 people

After printing, the program waits for one line of input and then exits. It
takes no options apart from `--help`.

## Library use

### Rooms and equipment

Equipment classes live in `studiobook.equipment`:

- `Microphone`, `Piano`, `Synthesizer`, `ElectricGuitarAmp`, `ElectricBassAmp`
- `SmallDrums`, `StandardDrums`
- `BasicSoundSystem`, `AdvancedSoundSystem`
- `BasicLightingSystem`, `AdvancedLightingSystem`
- `Stage`

Each piece has a `name`, a `description` and an `information` property, which
reads `"<name> | <description>"`.

Room classes live in `studiobook.rooms`. Each has its own hourly rate:

| Room | Hourly rate |
| --- | --- |
| `RecordingRoom` | 10 |
| `SmallDrumRoom` | 15 |
| `StandardDrumRoom` | 20 |
| `SoloDuoRoom` | 20 |
| `BandRoom` | 20 plus 5 per person of capacity |

`SmallDrumRoom` and `StandardDrumRoom` share the base class `DrumRoom`.

`make_room` builds a room and adds one piece of each equipment type you pass
to it. Rooms provide these methods:

- `add_equipment` adds one piece of the given type.
- `count_equipment` counts the pieces that are instances of a type, including
  subclasses.
- `details()` describes the room and lists its equipment.

```python
from studiobook.rooms import BandRoom, make_room
from studiobook.equipment import BasicSoundSystem, Microphone, StandardDrums, Piano

room = make_room(BandRoom, 4, BasicSoundSystem, Microphone, Microphone, StandardDrums, Piano)
room.count_equipment(Microphone)   # 2
print(room.details())
```

### Managing rooms

`RoomManager` in `studiobook.room_manager` holds the rooms, keyed by room id.

`create_room(room_type, capacity)` builds a room and returns its id. It raises
`RoomLimitError` once the studio already has as many rooms of that type and
capacity as it may hold:

| Room | Limit |
| --- | --- |
| `RecordingRoom` | 3 |
| `SmallDrumRoom` | 2 |
| `StandardDrumRoom` | 1 |
| `SoloDuoRoom` | 2 |
| 3-person `BandRoom` | 1 |
| 4-person `BandRoom` | 2 |
| 6-person `BandRoom` | 1 |
| 10-person `BandRoom` | 1 |

A `BandRoom` of any other size cannot be created this way. The sizes are
listed in `BandRoomSize`.

The manager also provides:

- `add_room` and `add_rooms` register rooms that are already built. They do
  not check the limits.
- `get_room` returns the first room of a type, optionally of a given capacity.
- `get_all_rooms` returns every matching room.
- `count_rooms_of_type` counts the matching rooms.
- `get_room_by_id` looks up a room by its id.
- `remove_room` removes a room.
- `clear` removes every room.
- `print_all_room_details` writes every room's details.

### Users and roles

`studiobook.users` provides `User`, `Receptionist`, `Administrator` and the
`Role` enum:

- `Role.NONE`
- `Role.MUSICIAN`
- `Role.RECEPTIONIST`
- `Role.ADMINISTRATOR`

An administrator hands out roles with `assign_role`. It raises
`PermissionError` if the administrator no longer holds the administrator role.

```python
from studiobook.users import Administrator, Receptionist, Role, User

admin = Administrator("Ada", "Admin", "admin@example.com")
musician = User("Tim", "Player", "tim@example.com")
desk = Receptionist("Rita", "Desk", "desk@example.com")
admin.assign_role(musician, Role.MUSICIAN)
admin.assign_role(desk, Role.RECEPTIONIST)
```

### Bookings

`BookingManager` in `studiobook.booking_manager` takes a `RoomManager` and
keeps `Booking` objects from `studiobook.booking`. Times are 24-hour `HH:MM`
strings. Every refusal raises `BookingError`.

- `create_booking` and `modify_booking` check four things: the room exists,
  both times are valid, the size is between 1 and the room's capacity, and a
  user is given. `create_booking` returns the new booking's id.
- `cancel_booking` needs a musician and a receptionist. Both times are taken as
  times of today. The cancellation is refused unless the current time is at
  least twelve hours later than the booking's start time.
- `check_in_user` needs a musician, a receptionist and the booked room. It is
  refused if the room is not available, or if the current time is more than
  ten minutes after the start time. On success it marks the room unavailable.
- `check_out_user` needs a prior check-in. It makes the room available again.
- `get_booking`, `get_booking_for_user`, `booking_information`,
  `remove_booking` and `clear` look up, describe and remove bookings.

```python
from studiobook.booking_manager import BookingManager
from studiobook.room_manager import RoomManager
from studiobook.rooms import RecordingRoom

rooms = RoomManager()
bookings = BookingManager(rooms)
room_id = rooms.create_room(RecordingRoom, 1)
booking_id = bookings.create_booking(musician, "11:00", "14:00", room_id, 1)
print(bookings.booking_information(booking_id))
bookings.check_in_user(musician, desk, booking_id, room_id, "10:55")
bookings.check_out_user(musician, desk, booking_id, room_id, "13:55")
```

`Booking.duration_hours()` gives the booked time in hours.

### Payments

`PaymentManager` in `studiobook.payment` takes the room and booking managers.

- `get_price_for_booked_room(room_id, booking_id)` returns the room's hourly
  rate times the booked hours.
- `perform_payment(receptionist, user, price, funds)` returns
  `"Transaction successful"`.

Both raise `PaymentError` when a price or payment cannot go through. For
`perform_payment` that means the funds fall short, or the receptionist or the
musician lacks the needed role.

## What it does not do

- Rooms, users and bookings are not saved anywhere. They last only as long as
  the objects that hold them.
- Bookings are not checked against each other. Overlapping bookings of one
  room are accepted.
- No money is actually moved. There are no refunds.
- The `studiobook` command only lists rooms. Booking, check-in and payment are
  available through the library alone.