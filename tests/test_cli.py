import io
import json
import sys

import pytest
import responses

from roomchat import domain
from roomchat.cli import main


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def servers_file(tmp_path):
    path = tmp_path / "servers.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Home", "ip": "127.0.0.1", "port": 8080},
                {"name": "Office", "ip": "10.0.0.2", "port": 9001},
            ]
        ),
        encoding="utf-8",
    )
    return path


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_missing_file_uses_default_server(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "\nexit\n")
    assert main(["--servers", str(tmp_path / "absent.json")]) == 0
    out = capsys.readouterr().out
    assert "0) Default Localhost [127.0.0.1:8080]" in out
    assert "You are not logged in" in out


def test_lists_servers_and_uses_selected_one(monkeypatch, capsys, rsps, servers_file):
    rsps.add(responses.GET, "http://10.0.0.2:9001" + domain.USERS_ONLINE, json=["alice"])
    _feed(monkeypatch, "1\nlist\n")
    assert main(["--servers", str(servers_file)]) == 0
    out = capsys.readouterr().out
    assert "0) Home [127.0.0.1:8080]" in out
    assert "1) Office [10.0.0.2:9001]" in out
    assert '["alice"]' in out
    assert len(rsps.calls) == 1


def test_unknown_and_blank_commands(monkeypatch, capsys, servers_file):
    _feed(monkeypatch, "0\n\ndance\nexit\n")
    assert main(["--servers", str(servers_file)]) == 0
    assert capsys.readouterr().out.count("Unknown command") == 1


@pytest.mark.parametrize("choice", ["abc", "5", "-1"])
def test_bad_server_index(monkeypatch, capsys, servers_file, choice):
    _feed(monkeypatch, f"{choice}\n")
    assert main(["--servers", str(servers_file)]) == 2
    assert "error:" in capsys.readouterr().err


def test_malformed_server_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "servers.json"
    path.write_text("{not json", encoding="utf-8")
    _feed(monkeypatch, "")
    assert main(["--servers", str(path)]) == 2
    assert "error:" in capsys.readouterr().err


def test_empty_server_list(monkeypatch, capsys, tmp_path):
    path = tmp_path / "servers.json"
    path.write_text("[]", encoding="utf-8")
    _feed(monkeypatch, "\n")
    assert main(["--servers", str(path)]) == 2
    assert "no servers configured" in capsys.readouterr().err