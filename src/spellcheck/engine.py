# spellcheck/engine.py
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from . import codec
from . import config as CFG
from .DB.api import DictionaryStore, make_store
from .channel import LineChannel
from .evaluator import evaluate, substitute
from .server import SpellCheckServer
from .session import SessionCoordinator

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the dictionary store (flat file or in-memory) via make_store(),
      - the session coordinator (interactive, one conversation per channel),
      - the threaded TCP server.

    Public API (used by CLI/Flask):
      * build(dict_path | db_dsn, ...): load the word list and attach a store
      * session(channel):  run one interactive session over a channel
      * check(line):       non-interactive validate + rank of one line
      * add_word(word):    approve-add a word
      * serve(host, port): accept connections until shutdown()
      * shutdown():        stop serving and close the store

    Storage DSNs (via spellcheck.DB.api.make_store):
      - "file:///path/to/words.txt"
      - "memory://"
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.store: Optional[DictionaryStore] = None
        self._server: Optional[SpellCheckServer] = None
        self.top_k: int = CFG.TOP_K
        self._serving = False

    # /* ~~~ Load the dictionary and wire up storage ~~~ */
    def build(
        self,
        dict_path: Optional[str] = None,
        *,
        db_dsn: Optional[str] = None,          # overrides dict_path, e.g. "memory://"
        words: Optional[list[str]] = None,     # seed words for memory:// stores
        top_k: Optional[int] = None,
        max_size: Optional[int] = None,
        verbose: bool = False,
    ) -> "Engine":
        if verbose:
            logging.basicConfig(level=logging.INFO)

        if top_k is not None:
            self.top_k = int(top_k)

        dsn = db_dsn or f"file://{dict_path or CFG.DICT_FILE}"
        log.info("Initializing dictionary store: %s", dsn)
        self.store = make_store(dsn, words=words, max_size=max_size)
        log.info("Engine build() complete: words=%d", self.store.count())
        return self

    # ------------- queries -------------

    def session(self, channel: LineChannel):
        return SessionCoordinator(self._require_store(), top_k=self.top_k).run(channel)

    # /* ~~~ Validate and rank a line without asking anything ~~~ */
    def check(self, line: str) -> Dict[str, Any]:
        """
        Raises the codec's InputValidationError subclasses for invalid lines.
        `output` is what the line becomes if every unknown word is declined.
        """
        store = self._require_store()
        checked = codec.check_line(codec.strip_terminator(line))
        tokens = codec.tokenize(codec.normalize_line(checked))

        rows = []
        out = []
        for tok in tokens:
            ev = evaluate(tok, store, self.top_k)
            rows.append({
                "index": tok.index,
                "token": tok.text,
                "exact": not ev.requires_decision,
                "matches": [{"word": c.word, "distance": c.distance} for c in ev.ranked],
            })
            out.append(tok.text if not ev.requires_decision else substitute(ev).replacement)
        return {"input": checked.raw, "tokens": rows, "output": codec.join_output(out)}

    def add_word(self, word: str) -> bool:
        return self._require_store().insert(word)

    # ------------- serving -------------

    def serve(self, host: Optional[str] = None, port: Optional[int] = None,
              *, read_timeout: Optional[float] = None) -> None:
        server = self.start_server(host, port, read_timeout=read_timeout)
        log.info("Server is running on port %d", server.port)
        self._serving = True
        server.serve_forever()

    def start_server(self, host: Optional[str] = None, port: Optional[int] = None,
                     *, read_timeout: Optional[float] = None,
                     background: bool = False) -> SpellCheckServer:
        server = SpellCheckServer(self._require_store(), host, port,
                                  top_k=self.top_k, read_timeout=read_timeout)
        self._server = server
        if background:
            self._serving = True
            t = threading.Thread(target=server.serve_forever, name="spellcheck-server", daemon=True)
            t.start()
        return server

    # ------------- teardown -------------

    # /* ~~~ Stop serving and close the store ~~~ */
    def shutdown(self) -> None:
        try:
            if self._server:
                if self._serving:
                    self._server.shutdown()
                self._server.server_close()
        finally:
            self._server = None
            self._serving = False
            if self.store:
                self.store.close()
            self.store = None
            log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_store(self) -> DictionaryStore:
        if self.store is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.store
