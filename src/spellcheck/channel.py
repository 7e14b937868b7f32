# spellcheck/channel.py
"""Send-text / receive-line primitives the session talks through."""
from __future__ import annotations
import logging
import socket
from typing import BinaryIO, Optional, Protocol, TextIO

from . import config as CFG
from .codec import strip_terminator

log = logging.getLogger(__name__)


class LineChannel(Protocol):
    def send(self, text: str) -> None: ...
    def receive_line(self) -> Optional[str]: ...


class SocketChannel:
    """
    Channel over the buffered binary files of a connected socket.

    receive_line() returns None on EOF, on a reset connection or when the
    read timed out; callers treat all three as "nothing was sent". After a
    failed read the socket file cannot be read again, so every later call
    returns None straight away.
    """

    def __init__(self, rfile: BinaryIO, wfile: BinaryIO, *, peer: str = "?") -> None:
        self.rfile = rfile
        self.wfile = wfile
        self.peer = peer
        self._dead = False

    def send(self, text: str) -> None:
        self.wfile.write(text.encode(CFG.ENCODING))
        self.wfile.flush()

    def receive_line(self) -> Optional[str]:
        if self._dead:
            return None
        try:
            data = self.rfile.readline(CFG.LINE_READ_LIMIT)
        except socket.timeout:
            log.info("%s: read timed out", self.peer)
            self._dead = True
            return None
        except OSError as exc:
            log.info("%s: connection lost during read: %s", self.peer, exc)
            self._dead = True
            return None
        if not data:
            self._dead = True
            return None
        return strip_terminator(data.decode(CFG.ENCODING, errors="replace"))


class StreamChannel:
    """Channel over text streams (the console session uses stdin/stdout)."""

    def __init__(self, infile: TextIO, outfile: TextIO) -> None:
        self.infile = infile
        self.outfile = outfile

    def send(self, text: str) -> None:
        self.outfile.write(text)
        self.outfile.flush()

    def receive_line(self) -> Optional[str]:
        line = self.infile.readline(CFG.LINE_READ_LIMIT)
        if not line:
            return None
        return strip_terminator(line)
