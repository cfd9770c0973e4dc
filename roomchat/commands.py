"""Parsing and running the interactive chat commands."""

import enum
from typing import Callable

from roomchat.client import ChatClient


class Command(enum.Enum):
    """A command word typed by the user."""

    REGISTER = "register"
    LOGIN = "login"
    SEND = "send"
    LIST = "list"
    LOGOUT = "logout"
    EXIT = "exit"
    CREATE_ROOM = "create-room"
    JOIN_ROOM = "join-room"
    LEAVE_ROOM = "leave-room"
    LIST_ROOMS = "rooms"
    CURRENT_ROOM = "room"
    USERS_IN_ROOM = "list-room"
    UNKNOWN = ""


_BY_WORD = {command.value: command for command in Command if command is not Command.UNKNOWN}

_CREDENTIAL_PROMPTS = ("Login: ", "Password: ")


def parse_command(text: str) -> Command:
    """Return the command named by ``text`` exactly, or ``Command.UNKNOWN``."""
    return _BY_WORD.get(text, Command.UNKNOWN)


def _word(line: str) -> str:
    words = line.split()
    return words[0] if words else ""


def handle_command(
    cmd: Command, client: ChatClient, read_line: Callable[[str], str] = input
) -> bool:
    """Run ``cmd`` on ``client``, asking for arguments with ``read_line``.

    Return False when the session should end.
    """
    if cmd in (Command.REGISTER, Command.LOGIN):
        credentials = [_word(read_line(prompt)) for prompt in _CREDENTIAL_PROMPTS]
        if cmd is Command.REGISTER:
            client.register_user(*credentials)
        else:
            client.login_user(*credentials)
    elif cmd is Command.SEND:
        to = read_line("To (empty = Broadcast): ")
        text = read_line("Message: ")
        client.send_message(text, to)
    elif cmd is Command.LIST:
        client.get_online_users()
    elif cmd is Command.LOGOUT:
        client.logout_user()
    elif cmd is Command.EXIT:
        client.logout_user()
        return False
    elif cmd is Command.CREATE_ROOM:
        client.create_room(read_line("Room name: "))
    elif cmd is Command.JOIN_ROOM:
        client.join_room(read_line("Room name: "))
    elif cmd is Command.LEAVE_ROOM:
        client.leave_room()
    elif cmd is Command.LIST_ROOMS:
        client.list_rooms()
    elif cmd is Command.CURRENT_ROOM:
        client.get_current_room()
    elif cmd is Command.USERS_IN_ROOM:
        client.get_users_in_room(read_line("Room name: "))
    else:
        print("Unknown command")
    return True