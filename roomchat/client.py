"""HTTP and WebSocket client for the room chat server."""

import json
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
import websocket

from roomchat import domain

DEFAULT_IP = "127.0.0.1"
DEFAULT_PORT = 8080
REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class _Reply:
    status_code: int
    text: str


class WebSocketListener:
    """Prints events of the chat WebSocket from a background thread."""

    def __init__(self, url: str) -> None:
        self.url = url
        self.connected = False
        self.message_count = 0
        self.last_error: Any = None
        self._app = websocket.WebSocketApp(
            url,
            on_open=self._on_open,
            on_message=self._on_message,
            on_close=self._on_close,
            on_error=self._on_error,
        )
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        self._thread = threading.Thread(target=self._app.run_forever, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        print("Stop WebSocket")
        self._app.close()
        if self._thread is not None:
            self._thread.join(timeout=5)
            self._thread = None
        self.connected = False

    def _on_open(self, _ws: Any) -> None:
        self.connected = True
        print("Connection opened")

    def _on_message(self, _ws: Any, message: Any) -> None:
        self.message_count += 1
        print(f"Message: {message}")

    def _on_close(self, _ws: Any, code: Any, reason: Any) -> None:
        self.connected = False
        print(f"Closed with code {code}, reason: {reason}")

    def _on_error(self, _ws: Any, error: Any) -> None:
        self.last_error = error
        print(f"Error: {error}")


def _as_string(value: Any) -> Optional[str]:
    """Render a scalar JSON value as text; None for arrays and objects."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


class ChatClient:
    """Talks to one chat server over its REST API and chat WebSocket."""

    def __init__(
        self,
        ip: str = DEFAULT_IP,
        port: int = DEFAULT_PORT,
        *,
        session: Optional[requests.Session] = None,
        websocket_factory: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.base_url = f"http://{ip}:{port}"
        self.ws_url = f"ws://{ip}:{port}/ws/chat"
        self.token = ""
        self.user = ""
        self._http = session if session is not None else requests.Session()
        self._websocket_factory = websocket_factory or WebSocketListener
        self._listener: Any = None

    def is_logged_in(self) -> bool:
        return bool(self.token)

    def register_user(self, login: str, password: str) -> bool:
        body = {"login": login, "password": domain.hash_password(password)}
        reply = self._post(domain.AUTH_REGISTER, body, auth=False)
        print(reply.text)
        return reply.status_code == 200

    def login_user(self, login: str, password: str) -> bool:
        if self.is_logged_in():
            print(f"Already logged in {self.user}")
            return False
        body = {"login": login, "password": domain.hash_password(password)}
        reply = self._post(domain.AUTH_LOGIN, body, auth=False)
        if reply.status_code == 200 and self._take_token(reply.text):
            self.user = login
            self._start_websocket()
            return True
        self.token = ""
        print(f"Login failed: {reply.text}")
        return False

    def logout_user(self) -> bool:
        if not self.is_logged_in():
            print("You are not logged in")
            return False
        reply = self._post(domain.AUTH_LOGOUT, {})
        self.token = ""
        self._stop_websocket()
        print("Logged out successfully.")
        return reply.status_code == 200

    def get_online_users(self) -> bool:
        return self._report(self._get(domain.USERS_ONLINE))

    def send_message(self, text: str, to: str = "") -> bool:
        """Send ``text`` to user ``to``; an empty ``to`` broadcasts."""
        return self._report(self._post(domain.MESSAGE_SEND, {"text": text, "to": to}))

    def create_room(self, name: str) -> bool:
        return self._report(self._post(domain.ROOM_CREATE, {"name": name}))

    def join_room(self, name: str) -> bool:
        return self._report(self._post(domain.ROOM_JOIN, {"name": name}))

    def leave_room(self) -> bool:
        return self._report(self._post(domain.ROOM_LEAVE, {}))

    def list_rooms(self) -> bool:
        return self._report(self._get(domain.ROOM_LIST))

    def get_current_room(self) -> bool:
        return self._report(self._get(domain.ROOM_CURRENT))

    def get_users_in_room(self, room_name: str) -> bool:
        return self._report(self._get(domain.ROOM_USERS, params={"name": room_name}))

    @staticmethod
    def _report(reply: _Reply) -> bool:
        print(reply.text)
        return reply.status_code == 200

    def _take_token(self, text: str) -> bool:
        try:
            root = json.loads(text)
        except ValueError:
            return False
        if not isinstance(root, dict) or "token" not in root:
            return False
        token = _as_string(root["token"])
        if token is None:
            return False
        self.token = token
        print(f"Token: {self.token}")
        return True

    def _headers(self, auth: bool) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if auth else {}

    def _post(self, endpoint: str, body: Dict[str, Any], auth: bool = True) -> _Reply:
        headers = {"Content-Type": "application/json", **self._headers(auth)}
        try:
            response = self._http.post(
                self.base_url + endpoint,
                data=json.dumps(body),
                headers=headers,
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as exc:
            return _Reply(0, str(exc))
        return _Reply(response.status_code, response.text)

    def _get(
        self, endpoint: str, auth: bool = True, params: Optional[Dict[str, str]] = None
    ) -> _Reply:
        try:
            response = self._http.get(
                self.base_url + endpoint,
                headers=self._headers(auth),
                params=params,
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as exc:
            return _Reply(0, str(exc))
        return _Reply(response.status_code, response.text)

    def _start_websocket(self) -> None:
        url = f"{self.ws_url}?token={self.token}"
        print(f"WebSocket: connecting to {url}...")
        self._listener = self._websocket_factory(url)
        self._listener.start()

    def _stop_websocket(self) -> None:
        if self._listener is not None:
            self._listener.stop()
            self._listener = None