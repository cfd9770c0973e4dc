"""Thread-safe bookkeeping of chat rooms and the users in them."""

import threading
from typing import Dict, List, Set

GENERAL_ROOM = "general"


class RoomManager:
    """Tracks which rooms exist and which room each user is in."""

    def __init__(self, default_room: str = GENERAL_ROOM) -> None:
        self.default_room = default_room
        self._room_users: Dict[str, Set[str]] = {default_room: set()}
        self._user_room: Dict[str, str] = {}
        self._lock = threading.Lock()

    def create_room(self, room: str) -> bool:
        """Create ``room``; return False if it already exists."""
        with self._lock:
            if room in self._room_users:
                return False
            self._room_users[room] = set()
            return True

    def join_room(self, user: str, room: str) -> bool:
        """Move ``user`` into an existing ``room``; False if absent or already there."""
        with self._lock:
            if room not in self._room_users:
                return False
            current = self._user_room.setdefault(user, "")
            if current == room:
                return False
            if current:
                self._room_users.setdefault(current, set()).discard(user)
            self._room_users[room].add(user)
            self._user_room[user] = room
            return True

    def leave_room(self, user: str) -> bool:
        """Move ``user`` back to the default room; False if already there."""
        with self._lock:
            current = self._user_room.setdefault(user, "")
            if current == self.default_room:
                return False
            if current:
                self._room_users.setdefault(current, set()).discard(user)
            self._room_users.setdefault(self.default_room, set()).add(user)
            self._user_room[user] = self.default_room
            return True

    def room_of(self, user: str) -> str:
        """Return the user's room, or the default room for unknown users."""
        with self._lock:
            return self._user_room.get(user, self.default_room)

    def has_room(self, room: str) -> bool:
        with self._lock:
            return room in self._room_users

    def list_rooms(self) -> List[str]:
        with self._lock:
            return list(self._room_users)

    def users_in_room(self, room: str) -> List[str]:
        """Return the users in ``room``; empty if the room does not exist."""
        with self._lock:
            return list(self._room_users.get(room, ()))

    def remove_user(self, user: str) -> None:
        """Forget ``user`` entirely."""
        with self._lock:
            room = self._user_room.pop(user, None)
            if room is not None and room in self._room_users:
                self._room_users[room].discard(user)