"""Thread-safe registry of user logins and password hashes."""

import threading
from typing import Dict


class UserManager:
    """Stores registered users and checks their credentials."""

    def __init__(self) -> None:
        self._users: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, login: str, password: str) -> bool:
        """Register ``login``; return False if it is already taken."""
        with self._lock:
            if login in self._users:
                return False
            self._users[login] = password
            return True

    def has_user(self, login: str, password: str) -> bool:
        """Return True if ``login`` exists with exactly this password."""
        with self._lock:
            return self._users.get(login) == password and login in self._users