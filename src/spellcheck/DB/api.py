# spellcheck/DB/api.py
from __future__ import annotations
from typing import Protocol, Iterable, Optional, Tuple


class DictionaryStore(Protocol):
    # Read
    def lookup(self, word: str) -> bool: ...
    def snapshot(self) -> Tuple[str, ...]: ...
    def count(self) -> int: ...
    # Insert (append-only)
    def insert(self, word: str) -> bool: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(
    dsn: str,
    *,
    words: Optional[Iterable[str]] = None,
    max_size: Optional[int] = None,
) -> DictionaryStore:
    """
    Factory:
      - file:///path/to/words.txt -> FileStore (loads the list unless `words` is given)
      - memory://                 -> MemoryStore (seeded with `words` if any)
    """
    if dsn.startswith("file://"):
        from .file_store import FileStore
        from ..loader import load_dictionary

        path = dsn.removeprefix("file://")
        if not path:
            raise ValueError(f"Missing path in store DSN: {dsn}")
        if words is None:
            words = load_dictionary(path)
        return FileStore(path, words=words, max_size=max_size)

    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore(words=words, max_size=max_size)

    raise ValueError(f"Unsupported store DSN: {dsn}")
