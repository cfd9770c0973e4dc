"""Interactive command-line chat client."""

import argparse
import sys
from typing import List, Optional, Sequence

from roomchat.client import ChatClient
from roomchat.commands import handle_command, parse_command
from roomchat.server_loader import ServerInfo, load_server_list

DEFAULT_SERVERS = "../data/servers.json"
PROMPT = (
    "\nCommands (register/login/send/list/logout/exit/create-room/join-room/"
    "leave-room/rooms/room/list-room): "
)


def _select(servers: List[ServerInfo], choice: str) -> ServerInfo:
    if not servers:
        raise ValueError("no servers configured")
    if not choice:
        return servers[0]
    try:
        index = int(choice)
    except ValueError:
        raise ValueError(f"invalid server index: {choice!r}") from None
    if not 0 <= index < len(servers):
        raise ValueError(f"server index out of range: {index}")
    return servers[index]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="roomchat", description="Interactive room chat client.")
    parser.add_argument(
        "--servers",
        default=DEFAULT_SERVERS,
        help="JSON file listing the known servers",
    )
    args = parser.parse_args(argv)

    try:
        servers = load_server_list(args.servers)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("Servers:")
    for index, server in enumerate(servers):
        print(f"{index}) {server.name} [{server.ip}:{server.port}]")

    try:
        choice = input("Select server by index: ").strip()
    except EOFError:
        choice = ""
    try:
        server = _select(servers, choice)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    client = ChatClient(server.ip, server.port)
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            if client.is_logged_in():
                client.logout_user()
            break
        words = line.split()
        if not words:
            continue
        if not handle_command(parse_command(words[0]), client):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())