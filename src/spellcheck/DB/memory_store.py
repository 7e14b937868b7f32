# spellcheck/DB/memory_store.py
from __future__ import annotations
import logging
import threading
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .. import config as CFG
from ..errors import DictionaryFullError
from ..normalize import normalize_word, is_alpha_word

log = logging.getLogger(__name__)


class _State(NamedTuple):
    words: Tuple[str, ...]     # insertion order (drives ranking ties)
    index: frozenset           # same words, for O(1) lookup


class MemoryStore:
    """
    Append-only word set kept in memory (useful for tests or ephemeral runs).

    Readers never lock: lookup() and snapshot() read one immutable _State.
    insert() builds the next _State under a single lock and publishes it with
    one attribute assignment, after _persist() succeeded, so a reader sees
    either the old or the new state and never a half-applied insert.
    Subclasses persist by overriding _persist().
    """

    def __init__(self, words: Optional[Iterable[str]] = None, *, max_size: Optional[int] = None) -> None:
        self.max_size = max_size if max_size is not None else CFG.DICT_SIZE
        self._lock = threading.Lock()
        self._state = self._seed(words or ())
        self._init_backing()

    def _init_backing(self) -> None:
        # the "persisted list" of a memory:// store
        self.backing: List[str] = list(self._state.words)

    def _seed(self, words: Iterable[str]) -> _State:
        ordered: List[str] = []
        seen = set()
        dropped = 0
        for raw in words:
            w = normalize_word(raw)
            if not w:
                continue
            if w in seen:
                log.debug("Duplicate dictionary entry ignored: %r", w)
                continue
            if len(ordered) >= self.max_size:
                dropped += 1
                continue
            seen.add(w)
            ordered.append(w)
        if dropped:
            log.warning("Dictionary holds more than %d words; %d entries ignored", self.max_size, dropped)
        return _State(tuple(ordered), frozenset(ordered))

    # R
    def lookup(self, word: str) -> bool:
        return normalize_word(word) in self._state.index

    def snapshot(self) -> Tuple[str, ...]:
        return self._state.words

    def count(self) -> int:
        return len(self._state.words)

    def __contains__(self, word: str) -> bool:
        return self.lookup(word)

    # C
    def insert(self, word: str) -> bool:
        """
        Add `word` if it is new; return False when it is already present.

        Raises ValueError for words that are not alphabetic or exceed the
        length bound, DictionaryFullError when the store is at capacity, and
        PersistenceError (from _persist) when the backing write fails. In every
        error case the in-memory state is unchanged.
        """
        w = normalize_word(word)
        if not is_alpha_word(w):
            raise ValueError(f"not a dictionary word: {word!r}")
        if len(w) > CFG.MAX_WORD_LENGTH:
            raise ValueError(f"word longer than {CFG.MAX_WORD_LENGTH} characters")
        if w in self._state.index:
            return False

        with self._lock:
            state = self._state
            if w in state.index:        # lost the race to another inserter
                return False
            if len(state.words) >= self.max_size:
                raise DictionaryFullError(f"dictionary is full ({self.max_size} words)")
            self._persist(w)
            self._state = _State(state.words + (w,), state.index | {w})

        log.info("Added %r to dictionary (size=%d)", w, self.count())
        return True

    def _persist(self, word: str) -> None:
        self.backing.append(word)

    # lifecycle
    def close(self) -> None:
        log.debug("Store closed with %d words", self.count())
