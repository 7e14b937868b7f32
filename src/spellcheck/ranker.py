# spellcheck/ranker.py
from __future__ import annotations
import logging
from typing import Iterable, List

from .config import TOP_K
from .models import RankedList

log = logging.getLogger(__name__)


def levenshtein(a: str, b: str) -> int:
    """
    Unit-cost edit distance (insert, delete, substitute) between a and b.

    Wagner-Fischer with two rolling rows sized once per call:
        d[i][0] = i, d[0][j] = j
        d[i][j] = min(d[i-1][j] + 1, d[i][j-1] + 1, d[i-1][j-1] + cost)
    where cost is 0 iff a[i-1] == b[j-1].
    """
    if a == b:
        return 0
    m = len(b)
    prev: List[int] = list(range(m + 1))
    cur: List[int] = [0] * (m + 1)
    for i, ca in enumerate(a, start=1):
        cur[0] = i
        for j in range(1, m + 1):
            cost = 0 if ca == b[j - 1] else 1
            cur[j] = min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + cost)
        prev, cur = cur, prev
    return prev[m]


def rank(token: str, words: Iterable[str], k: int = TOP_K) -> RankedList:
    """
    Return the best `k` dictionary words for `token`, ascending by distance.

    `words` is scanned in order (the store's insertion order). Ties keep the
    word seen first; once the list is full a later word has to be strictly
    closer than the current worst to get in.
    """
    q = token.lower()
    ranked = RankedList(k)
    for w in words:
        worst = ranked.worst_distance()
        # |len(q) - len(w)| is a lower bound on the distance
        if worst is not None and abs(len(q) - len(w)) >= worst:
            continue
        ranked.offer(w, levenshtein(q, w.lower()))
    log.debug("rank(%r) -> %s", token, ranked.as_tuples())
    return ranked
