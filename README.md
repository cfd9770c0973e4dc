# roomchat

A small chat built around rooms. Users register and log in over a REST
API, send messages to everyone or to one person, and move between rooms.
While a user is logged in, messages arrive over a WebSocket.

The package holds a console client for such a server and the in-memory
pieces a chat server keeps its state in.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The console client

```
roomchat
roomchat --servers path/to/servers.json
```

The client first reads a list of servers from a JSON file, by default
`../data/servers.json` relative to the current directory. The file holds
an array of objects with `name`, `ip` and `port` (an object whose values
are such entries is accepted too). Missing fields fall back to
`Unnamed`, `127.0.0.1` and `8080`. If the file cannot be opened, a single
"Default Localhost" entry at `127.0.0.1:8080` is used; a file that is not
valid JSON, or an entry with a port that is not a non-negative number,
makes the client stop with exit status 2.

The servers are listed with their indexes and you pick one; an empty
answer picks the first. An index that is not a number or out of range
also ends the client with exit status 2. Then you type commands; only
the first word of a line counts and empty lines are ignored:

| command       | what it does                                           |
|---------------|--------------------------------------------------------|
| `register`    | asks for a login and a password and registers          |
| `login`       | logs in and opens the WebSocket for incoming messages  |
| `send`        | asks for a recipient and a message; an empty recipient sends to everyone |
| `list`        | shows the users who are online                         |
| `logout`      | logs out and closes the WebSocket                      |
| `create-room` | creates a room                                         |
| `join-room`   | moves you into a room                                  |
| `leave-room`  | moves you back to the general room                     |
| `rooms`       | lists all rooms                                        |
| `room`        | shows the room you are in                              |
| `list-room`   | lists the users in a room                              |
| `exit`        | logs out and quits                                     |

Any other word prints `Unknown command`. At the end of input the client
logs out if it is logged in and quits.

Passwords never leave the client in clear text: they are sent as the
64-character lowercase hex SHA-256 digest.

## Using it from Python

```python
from roomchat.client import ChatClient

password = "password"
client = ChatClient("127.0.0.1", 8080)
client.register_user("alice", password)
if client.login_user("alice", password):
    client.create_room("books")
    client.join_room("books")
    client.send_message("hello", "")
    client.logout_user()
```

Each request method prints the server's reply and returns whether the
server answered with status 200; a failed connection counts as a failure
and its error text is printed. `login_user` refuses while already logged
in, and `logout_user` refuses while logged out. `ChatClient` also takes a
`requests.Session` as `session=` and a factory for the WebSocket listener
as `websocket_factory=`.

The commands can be driven without a terminal:

```python
from roomchat.commands import Command, handle_command, parse_command

parse_command("rooms")            # Command.LIST_ROOMS
parse_command("nope")             # Command.UNKNOWN
handle_command(Command.CREATE_ROOM, client, lambda prompt: "books")
```

`handle_command` returns `False` only for `Command.EXIT`.

```python
from roomchat.domain import hash_password
from roomchat.server_loader import load_server_list

digest = hash_password("password")     # 64 hex characters
servers = load_server_list("servers.json")   # list of ServerInfo(name, ip, port)
```

`roomchat.domain` also holds the REST endpoint paths, such as
`AUTH_LOGIN` (`/api/auth/login`) and `ROOM_USERS` (`/api/room/users`).

### Server-side state

```python
from roomchat.rooms import RoomManager
from roomchat.users import UserManager
from roomchat.tokens import TokenGenerator

rooms = RoomManager()          # starts with the "general" room
rooms.create_room("books")     # False if it already exists
rooms.join_room("alice", "books")
rooms.room_of("alice")         # "books"
rooms.leave_room("alice")      # back to "general"
rooms.users_in_room("general") # ["alice"]
rooms.remove_user("alice")

users = UserManager()
users.register("alice", digest)    # False if the login is taken
users.has_user("alice", digest)    # True

TokenGenerator().generate_hex_token()   # 32 hex characters
```

All three are safe to share between threads. `TokenGenerator(seed=...)`
gives a reproducible sequence of tokens.

## What it does not do

The package has no chat server. There is no HTTP or WebSocket endpoint,
no storage of session tokens, no delivery of messages to connected
users and no persistence: `RoomManager`, `UserManager` and
`TokenGenerator` are only the in-memory state such a server would use.
The console client needs a running server to talk to.