from dataclasses import dataclass

import pytest

from studiobook.booking_manager import BookingError, BookingManager
from studiobook.room_manager import RoomManager
from studiobook.rooms import RecordingRoom
from studiobook.users import Administrator, Receptionist, Role, User


@dataclass
class Context:
    rooms: RoomManager
    bookings: BookingManager
    user: User
    receptionist: Receptionist
    admin: Administrator


@pytest.fixture
def ctx():
    rooms = RoomManager()
    bookings = BookingManager(rooms)
    user = User("Tim", "Henson", "tim@example.com")
    receptionist = Receptionist("John", "Mayer", "john@example.com")
    admin = Administrator("David", "Gilmour", "david@example.com")
    admin.assign_role(user, Role.MUSICIAN)
    admin.assign_role(receptionist, Role.RECEPTIONIST)
    return Context(rooms, bookings, user, receptionist, admin)


def _room(ctx):
    return ctx.rooms.create_room(RecordingRoom, 1)


def test_invalid_start_time(ctx):
    room_id = _room(ctx)
    with pytest.raises(BookingError, match="Invalid start time"):
        ctx.bookings.create_booking(ctx.user, "11:00am", "14:00", room_id, 1)


def test_invalid_end_time(ctx):
    room_id = _room(ctx)
    with pytest.raises(BookingError, match="Invalid end time"):
        ctx.bookings.create_booking(ctx.user, "11:00", "2:00pm", room_id, 1)


def test_user_not_created(ctx):
    room_id = _room(ctx)
    with pytest.raises(BookingError, match="User has not been created"):
        ctx.bookings.create_booking(None, "11:00", "14:00", room_id, 1)


def test_invalid_booking_size(ctx):
    room_id = _room(ctx)
    with pytest.raises(BookingError, match="Invalid size"):
        ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 2)


def test_zero_booking_size(ctx):
    room_id = _room(ctx)
    with pytest.raises(BookingError, match="Invalid size"):
        ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 0)


def test_room_does_not_exist(ctx):
    room_id = _room(ctx)
    ctx.rooms.remove_room(room_id)
    with pytest.raises(BookingError, match="does not exist"):
        ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)


def test_booking_exists_for_user(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    found = ctx.bookings.get_booking_for_user(ctx.user)
    assert found is ctx.bookings.get_booking(booking_id)
    assert found.id == booking_id


def test_booking_cancelled_too_late(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    with pytest.raises(BookingError):
        ctx.bookings.cancel_booking(booking_id, ctx.user, ctx.receptionist, "9:00")
    assert ctx.bookings.get_booking(booking_id) is not None


def test_cancel_with_enough_separation_removes_booking(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    ctx.bookings.cancel_booking(booking_id, ctx.user, ctx.receptionist, "23:30")
    assert ctx.bookings.get_booking(booking_id) is None


def test_cancel_unknown_booking(ctx):
    with pytest.raises(BookingError, match="not found"):
        ctx.bookings.cancel_booking("missing", ctx.user, ctx.receptionist, "23:30")


def test_cancel_requires_musician(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    ctx.user.role = Role.NONE
    with pytest.raises(BookingError, match="required role"):
        ctx.bookings.cancel_booking(booking_id, ctx.user, ctx.receptionist, "23:30")


def test_modify_booking(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "16:00", "18:00", room_id, 1)
    ctx.bookings.modify_booking(booking_id, ctx.user, "12:00", "14:00", room_id, 1)
    booking = ctx.bookings.get_booking(booking_id)
    assert (booking.start_time, booking.end_time) == ("12:00", "14:00")
    assert ctx.bookings.booking_information(booking_id) == booking.information()


def test_modify_rejects_invalid_time_and_keeps_booking(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "16:00", "18:00", room_id, 1)
    with pytest.raises(BookingError):
        ctx.bookings.modify_booking(booking_id, ctx.user, "24:00", "14:00", room_id, 1)
    assert ctx.bookings.get_booking(booking_id).start_time == "16:00"


def test_modify_unknown_booking(ctx):
    room_id = _room(ctx)
    with pytest.raises(BookingError, match="not found"):
        ctx.bookings.modify_booking("missing", ctx.user, "12:00", "14:00", room_id, 1)


def test_check_in_room_not_available(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    ctx.rooms.get_room_by_id(room_id).available = False
    with pytest.raises(BookingError, match="not available"):
        ctx.bookings.check_in_user(ctx.user, ctx.receptionist, booking_id, room_id, "10:55")


def test_check_in_wrong_room_selected(ctx):
    room_id = _room(ctx)
    other_room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    with pytest.raises(BookingError, match="Wrong check in"):
        ctx.bookings.check_in_user(
            ctx.user, ctx.receptionist, booking_id, other_room_id, "10:55"
        )


def test_check_in_booking_does_not_exist(ctx):
    _room(ctx)
    assert ctx.bookings.get_booking_for_user(ctx.user) is None


def test_user_checked_in_too_late(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    with pytest.raises(BookingError, match="late"):
        ctx.bookings.check_in_user(ctx.user, ctx.receptionist, booking_id, room_id, "11:15")
    assert ctx.bookings.get_booking(booking_id).checked_in is False


def test_user_checked_in(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    ctx.bookings.check_in_user(ctx.user, ctx.receptionist, booking_id, room_id, "10:55")
    assert ctx.bookings.get_booking(booking_id).checked_in is True
    assert ctx.rooms.get_room_by_id(room_id).available is False


def test_check_in_requires_receptionist(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    with pytest.raises(BookingError, match="required role"):
        ctx.bookings.check_in_user(ctx.user, ctx.user, booking_id, room_id, "10:55")


def test_user_checked_out_without_checking_in(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    with pytest.raises(BookingError, match="did not check in"):
        ctx.bookings.check_out_user(ctx.user, ctx.receptionist, booking_id, room_id, "13:55")


def test_user_checked_out(ctx):
    room_id = _room(ctx)
    booking_id = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    ctx.bookings.check_in_user(ctx.user, ctx.receptionist, booking_id, room_id, "10:55")
    ctx.bookings.check_out_user(ctx.user, ctx.receptionist, booking_id, room_id, "13:55")
    assert ctx.bookings.get_booking(booking_id).checked_in is False
    assert ctx.rooms.get_room_by_id(room_id).available is True


def test_remove_and_clear(ctx):
    room_id = _room(ctx)
    first = ctx.bookings.create_booking(ctx.user, "11:00", "14:00", room_id, 1)
    ctx.bookings.create_booking(ctx.user, "15:00", "16:00", room_id, 1)
    ctx.bookings.remove_booking(first)
    assert ctx.bookings.get_booking(first) is None
    assert len(ctx.bookings) == 1
    ctx.bookings.clear()
    assert len(ctx.bookings) == 0


def test_booking_information_of_unknown_booking(ctx):
    with pytest.raises(KeyError):
        ctx.bookings.booking_information("missing")