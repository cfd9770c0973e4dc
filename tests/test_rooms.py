import threading

import pytest

from roomchat.rooms import GENERAL_ROOM, RoomManager


@pytest.fixture
def rooms():
    return RoomManager()


def test_general_room_exists(rooms):
    assert rooms.list_rooms() == [GENERAL_ROOM]
    assert rooms.has_room(GENERAL_ROOM) is True
    assert rooms.users_in_room(GENERAL_ROOM) == []


def test_create_room_and_duplicate(rooms):
    assert rooms.create_room("lobby") is True
    assert rooms.create_room("lobby") is False
    assert rooms.create_room(GENERAL_ROOM) is False
    assert sorted(rooms.list_rooms()) == sorted([GENERAL_ROOM, "lobby"])


def test_join_missing_room_fails(rooms):
    assert rooms.join_room("alice", "nowhere") is False
    assert rooms.room_of("alice") == GENERAL_ROOM


def test_join_moves_user(rooms):
    rooms.create_room("a")
    rooms.create_room("b")
    assert rooms.join_room("alice", "a") is True
    assert rooms.users_in_room("a") == ["alice"]
    assert rooms.join_room("alice", "b") is True
    assert rooms.users_in_room("a") == []
    assert rooms.users_in_room("b") == ["alice"]
    assert rooms.room_of("alice") == "b"


def test_join_same_room_fails(rooms):
    rooms.create_room("a")
    rooms.join_room("alice", "a")
    assert rooms.join_room("alice", "a") is False
    assert rooms.users_in_room("a") == ["alice"]


def test_leave_moves_to_general(rooms):
    rooms.create_room("a")
    rooms.join_room("alice", "a")
    assert rooms.leave_room("alice") is True
    assert rooms.room_of("alice") == GENERAL_ROOM
    assert rooms.users_in_room("a") == []
    assert rooms.users_in_room(GENERAL_ROOM) == ["alice"]
    assert rooms.leave_room("alice") is False


def test_leave_for_new_user_places_in_general(rooms):
    assert rooms.leave_room("bob") is True
    assert rooms.users_in_room(GENERAL_ROOM) == ["bob"]


def test_users_in_unknown_room(rooms):
    assert rooms.users_in_room("ghost") == []
    assert rooms.has_room("ghost") is False


def test_remove_user(rooms):
    rooms.create_room("a")
    rooms.join_room("alice", "a")
    rooms.remove_user("alice")
    assert rooms.users_in_room("a") == []
    assert rooms.room_of("alice") == GENERAL_ROOM
    rooms.remove_user("nobody")
    assert rooms.users_in_room(GENERAL_ROOM) == []


def test_concurrent_joins_keep_sets_consistent(rooms):
    rooms.create_room("a")
    users = [f"user{i}" for i in range(40)]
    threads = [threading.Thread(target=rooms.join_room, args=(u, "a")) for u in users]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(rooms.users_in_room("a")) == sorted(users)