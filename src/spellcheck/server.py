# spellcheck/server.py
from __future__ import annotations
import logging
import socketserver
from typing import Optional

from . import config as CFG
from .DB.api import DictionaryStore
from .channel import SocketChannel
from .session import SessionCoordinator

log = logging.getLogger(__name__)


class SpellCheckHandler(socketserver.StreamRequestHandler):
    """One spell-check session per connection; the connection closes afterwards."""

    server: "SpellCheckServer"

    def setup(self) -> None:
        self.timeout = self.server.read_timeout
        super().setup()

    def handle(self) -> None:
        peer = "%s:%s" % self.client_address[:2]
        log.info("Connection from %s", peer)
        channel = SocketChannel(self.rfile, self.wfile, peer=peer)
        SessionCoordinator(self.server.store, top_k=self.server.top_k).run(channel)


class SpellCheckServer(socketserver.ThreadingTCPServer):
    """
    Threaded TCP accept loop. The dictionary store is the only state shared
    between connection threads.
    """

    allow_reuse_address = True
    daemon_threads = True
    request_queue_size = 3

    def __init__(
        self,
        store: DictionaryStore,
        host: Optional[str] = None,
        port: Optional[int] = None,
        *,
        top_k: Optional[int] = None,
        read_timeout: Optional[float] = None,
    ) -> None:
        self.store = store
        self.top_k = top_k if top_k is not None else CFG.TOP_K
        self.read_timeout = read_timeout if read_timeout is not None else CFG.READ_TIMEOUT
        addr = (host if host is not None else CFG.HOST,
                port if port is not None else CFG.PORT_NUMBER)
        super().__init__(addr, SpellCheckHandler)

    @property
    def port(self) -> int:
        return self.server_address[1]

    def get_request(self):
        try:
            return super().get_request()
        except OSError as exc:
            # socketserver drops the failed accept and keeps serving
            log.warning("Accept failed: %s", exc)
            raise

    def handle_error(self, request, client_address) -> None:
        log.exception("Error while serving %s", client_address)
