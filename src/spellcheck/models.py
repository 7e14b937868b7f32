# spellcheck/models.py
"""
Data models for the spell-check service.

This module defines the small containers that flow between the ranker, the
token evaluator and the session coordinator:

- Token: one validated, normalized word of an input line with its position.
- Candidate: a dictionary word paired with its edit distance to a token.
- RankedList: the bounded, ascending-by-distance list of best candidates.
- Evaluation: the compute-phase result for one token.
- ExactMatch / AddedNew / SubstitutedWith: the resolved outcome of one token.
- Session: per-connection transient state.

Apart from RankedList, which owns its ordering and capacity rules, these
classes hold no business logic.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class Token:
    """
    One whitespace-delimited unit of a validated input line.

    Attributes
    ----------
    index : int
        1-based position of the token in the line.
    text : str
        Normalized (lowercase, alphabetic) token text.
    """
    index: int
    text: str


@dataclass(frozen=True, slots=True)
class Candidate:
    word: str
    distance: int


class RankedList:
    """
    Fixed-capacity list of candidates, ascending by distance.

    A new candidate goes in front of the first kept entry whose distance is
    strictly greater than its own; entries pushed past capacity fall off the
    end. A candidate tied with an entry already kept lands after it, so with a
    full list later ties never get in (first found wins).
    """

    __slots__ = ("capacity", "_items")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._items: List[Candidate] = []

    def offer(self, word: str, distance: int) -> bool:
        """Insert (word, distance) if it ranks; return True when it was kept."""
        for pos, cur in enumerate(self._items):
            if cur.distance > distance:
                self._items.insert(pos, Candidate(word, distance))
                del self._items[self.capacity:]
                return True
        if len(self._items) < self.capacity:
            self._items.append(Candidate(word, distance))
            return True
        return False

    def worst_distance(self) -> Optional[int]:
        """Distance a new candidate must beat once the list is full, else None."""
        if len(self._items) < self.capacity:
            return None
        return self._items[-1].distance

    @property
    def best(self) -> Optional[Candidate]:
        return self._items[0] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._items)

    def __getitem__(self, i: int) -> Candidate:
        return self._items[i]

    def as_tuples(self) -> List[Tuple[str, int]]:
        return [(c.word, c.distance) for c in self._items]

    def __repr__(self) -> str:
        return f"RankedList({self.as_tuples()!r}, capacity={self.capacity})"


@dataclass(frozen=True, slots=True)
class Evaluation:
    """
    Compute-phase result for one token.

    Attributes
    ----------
    token : Token
        The token that was evaluated.
    ranked : RankedList
        Best candidates against the dictionary snapshot (also computed for
        exact hits, for the MATCHES display).
    requires_decision : bool
        True when the token was not found and the client must be asked
        whether to add it.
    """
    token: Token
    ranked: RankedList
    requires_decision: bool


# ---------- token outcomes ----------

@dataclass(frozen=True, slots=True)
class ExactMatch:
    word: str

    @property
    def replacement(self) -> str:
        return self.word


@dataclass(frozen=True, slots=True)
class AddedNew:
    word: str

    @property
    def replacement(self) -> str:
        return self.word


@dataclass(frozen=True, slots=True)
class SubstitutedWith:
    """The token was declined; `word` is the best candidate (or the token itself)."""
    token: str
    word: str

    @property
    def replacement(self) -> str:
        return self.word


TokenOutcome = Union[ExactMatch, AddedNew, SubstitutedWith]


@dataclass(slots=True)
class Session:
    """
    Per-connection transient state.

    Attributes
    ----------
    raw : str
        The input line exactly as received (line terminator removed).
    normalized : str
        Trimmed, lowercased line the tokens were cut from.
    tokens : List[Token]
        Tokens in left-to-right order.
    outcomes : List[TokenOutcome]
        Resolved outcomes, index-aligned with ``tokens``.
    """
    raw: str = ""
    normalized: str = ""
    tokens: List[Token] = field(default_factory=list)
    outcomes: List[TokenOutcome] = field(default_factory=list)

    def output_words(self) -> List[str]:
        return [o.replacement for o in self.outcomes]
