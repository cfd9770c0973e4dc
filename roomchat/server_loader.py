"""Loading the list of known chat servers from a JSON file."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Union

DEFAULT_NAME = "Unnamed"
DEFAULT_IP = "127.0.0.1"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class ServerInfo:
    """A named chat server address."""

    name: str
    ip: str
    port: int


def _parse_port(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"port must be a number, got {value!r}")
    port = int(value)
    if port < 0:
        raise ValueError(f"port must not be negative, got {value!r}")
    return port


def _server_from(entry: Any) -> ServerInfo:
    if entry is None:
        entry = {}
    if not isinstance(entry, dict):
        raise ValueError(f"server entry must be an object, got {entry!r}")
    return ServerInfo(
        name=str(entry.get("name", DEFAULT_NAME)),
        ip=str(entry.get("ip", DEFAULT_IP)),
        port=_parse_port(entry.get("port", DEFAULT_PORT)),
    )


def load_server_list(path: Union[str, Path]) -> List[ServerInfo]:
    """Read servers from ``path``; an unreadable file yields the local default.

    Malformed JSON or malformed entries raise ``ValueError``.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return [ServerInfo("Default Localhost", DEFAULT_IP, DEFAULT_PORT)]

    root = json.loads(text)
    if root is None:
        return []
    if isinstance(root, dict):
        entries = list(root.values())
    elif isinstance(root, list):
        entries = root
    else:
        raise ValueError("server list must be a JSON array or object")
    return [_server_from(entry) for entry in entries]