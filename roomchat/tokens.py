"""Generation of random hexadecimal session tokens."""

import random
import secrets
from typing import Optional


class TokenGenerator:
    """Produces 32-character hex tokens from two independent 64-bit streams."""

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            first, second = secrets.randbits(64), secrets.randbits(64)
        else:
            seeder = random.Random(seed)
            first, second = seeder.getrandbits(64), seeder.getrandbits(64)
        self._first = random.Random(first)
        self._second = random.Random(second)

    def generate_hex_token(self) -> str:
        """Return a new 32-character lowercase hex token."""
        return f"{self._first.getrandbits(64):016x}{self._second.getrandbits(64):016x}"


GENERATOR = TokenGenerator()