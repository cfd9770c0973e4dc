"""Shared API endpoints and the client-side password hash."""

import hashlib

AUTH_REGISTER = "/api/auth/register"
AUTH_LOGIN = "/api/auth/login"
AUTH_LOGOUT = "/api/auth/logout"

USERS_ONLINE = "/api/users/online"

MESSAGE_SEND = "/api/messages"

ROOM_CREATE = "/api/room/create"
ROOM_JOIN = "/api/room/join"
ROOM_LEAVE = "/api/room/leave"
ROOM_LIST = "/api/room/list"
ROOM_CURRENT = "/api/room/current"
ROOM_USERS = "/api/room/users"


def hash_password(password: str) -> str:
    """Return the SHA-256 of the UTF-8 password as 64 lowercase hex characters."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()