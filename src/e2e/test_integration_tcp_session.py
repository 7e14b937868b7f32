import socket
from pathlib import Path

import pytest

from spellcheck import Engine
from spellcheck.loader import load_dictionary

PROMPT = b"(y/N): "


def _seed(tmp: Path) -> str:
    path = tmp / "words.txt"
    path.write_text("cat\nhat\nbat\n", encoding="utf-8")
    return str(path)


def _read_until(sock: socket.socket, suffix: bytes) -> bytes:
    buf = b""
    while not buf.endswith(suffix):
        chunk = sock.recv(4096)
        if not chunk:
            break
        buf += chunk
    return buf


def _talk(port: int, line: str, *replies: str) -> str:
    with socket.create_connection(("127.0.0.1", port), timeout=5) as sock:
        out = _read_until(sock, b"Enter your string:\n")
        sock.sendall(line.encode() + b"\n")
        for r in replies:
            out += _read_until(sock, PROMPT)
            sock.sendall(r.encode() + b"\n")
        out += _read_until(sock, b"\x00")   # until the server closes
    return out.decode()


@pytest.mark.e2e
def test_tcp_decline_and_accept(tmp_path: Path):
    dict_path = _seed(tmp_path)
    eng = Engine().build(dict_path)
    try:
        server = eng.start_server("127.0.0.1", 0, background=True)

        text = _talk(server.port, "caat", "n")
        assert text.startswith("Welcome to Text Analysis Server!\n")
        assert "MATCHES: cat (1), hat (2), bat (2)\n" in text
        assert text.endswith("\nINPUT: caat\nOUTPUT: cat\n")

        text = _talk(server.port, "Cat xyz", "y")
        assert "INFO: Input contained uppercase letters." in text
        assert "Correct word!\n" in text
        assert text.endswith("\nINPUT: Cat xyz\nOUTPUT: cat xyz\n")
    finally:
        eng.shutdown()

    assert load_dictionary(dict_path) == ["cat", "hat", "bat", "xyz"]


@pytest.mark.e2e
def test_tcp_invalid_input_closes_connection(tmp_path: Path):
    eng = Engine().build(db_dsn="memory://", words=["cat"])
    try:
        server = eng.start_server("127.0.0.1", 0, background=True)
        text = _talk(server.port, "cat 42")
        assert text.endswith("ERROR: Input string contains unsupported characters!\n")
        assert "WORD" not in text

        # the server keeps serving after a rejected connection
        text = _talk(server.port, "cat")
        assert text.endswith("OUTPUT: cat\n")
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_tcp_client_hangs_up_at_prompt(tmp_path: Path):
    eng = Engine().build(db_dsn="memory://", words=["cat", "hat"])
    try:
        server = eng.start_server("127.0.0.1", 0, background=True)
        with socket.create_connection(("127.0.0.1", server.port), timeout=5) as sock:
            _read_until(sock, b"Enter your string:\n")
            sock.sendall(b"caat\n")
            _read_until(sock, PROMPT)
            sock.shutdown(socket.SHUT_WR)
            rest = _read_until(sock, b"\x00").decode()
        assert rest.endswith("OUTPUT: cat\n")
        assert not eng.store.lookup("caat")
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_tcp_silent_client_times_out_on_every_prompt(tmp_path: Path):
    eng = Engine().build(db_dsn="memory://", words=["cat", "hat", "bat"])
    try:
        server = eng.start_server("127.0.0.1", 0, read_timeout=0.5, background=True)
        with socket.create_connection(("127.0.0.1", server.port), timeout=5) as sock:
            _read_until(sock, b"Enter your string:\n")
            sock.sendall(b"caat baat\n")
            # never answer either prompt
            text = _read_until(sock, b"\x00").decode()
        assert text.count(PROMPT.decode()) == 2
        assert text.endswith("\nINPUT: caat baat\nOUTPUT: cat bat\n")
        assert eng.store.snapshot() == ("cat", "hat", "bat")
    finally:
        eng.shutdown()
