# spellcheck/DB/file_store.py
from __future__ import annotations
import logging
import os
from typing import Iterable, List, Optional

from .. import config as CFG
from ..errors import PersistenceError
from ..loader import load_dictionary
from .memory_store import MemoryStore

log = logging.getLogger(__name__)


class FileStore(MemoryStore):
    """Word set backed by a flat word list; new words are appended one per line."""

    def __init__(
        self,
        path: str,
        words: Optional[Iterable[str]] = None,
        *,
        max_size: Optional[int] = None,
    ) -> None:
        self.path = path
        super().__init__(words=words, max_size=max_size)
        self._needs_newline = _missing_trailing_newline(path)

    def _init_backing(self) -> None:
        pass    # the file itself is the persisted list

    @property
    def backing(self) -> List[str]:
        return load_dictionary(self.path)

    def _persist(self, word: str) -> None:
        # runs under the insert lock; nothing is published unless this returns
        line = ("\n" if self._needs_newline else "") + word + "\n"
        try:
            with open(self.path, "a", encoding=CFG.ENCODING) as f:
                f.write(line)
                f.flush()
                os.fsync(f.fileno())
        except OSError as exc:
            log.error("Appending %r to %s failed: %s", word, self.path, exc)
            raise PersistenceError(f"could not append to {self.path}") from exc
        self._needs_newline = False


def _missing_trailing_newline(path: str) -> bool:
    try:
        with open(path, "rb") as f:
            f.seek(0, os.SEEK_END)
            if f.tell() == 0:
                return False
            f.seek(-1, os.SEEK_END)
            return f.read(1) not in (b"\n", b"\r")
    except FileNotFoundError:
        return False
