# spellcheck/evaluator.py
from __future__ import annotations
import logging
from typing import Optional

from .DB.api import DictionaryStore
from .codec import is_affirmative
from .errors import DictionaryFullError, PersistenceError
from .models import (
    AddedNew,
    Evaluation,
    ExactMatch,
    SubstitutedWith,
    Token,
    TokenOutcome,
)
from .ranker import rank

log = logging.getLogger(__name__)


def evaluate(token: Token, store: DictionaryStore, k: int) -> Evaluation:
    """
    Compute phase for one token. Pure with respect to the connection: it reads
    the store and ranks against a snapshot, so it may run in a worker thread.
    The ranking is computed for exact hits too; the MATCHES line shows it.
    """
    exact = store.lookup(token.text)
    ranked = rank(token.text, store.snapshot(), k)
    return Evaluation(token=token, ranked=ranked, requires_decision=not exact)


def substitute(evaluation: Evaluation) -> SubstitutedWith:
    best = evaluation.ranked.best
    word = best.word if best is not None else evaluation.token.text
    return SubstitutedWith(token=evaluation.token.text, word=word)


def decide(evaluation: Evaluation, reply: Optional[str], store: DictionaryStore) -> TokenOutcome:
    """
    Resolve an unknown token from the client's reply.

    A reply starting with 'y' or 'Y' adds the token and keeps it verbatim.
    Anything else, None (no reply) included, substitutes the best candidate,
    or keeps the token when the dictionary had nothing to offer. A failed
    insert is logged and handled like a decline.
    """
    if not evaluation.requires_decision:
        return ExactMatch(evaluation.token.text)
    if not is_affirmative(reply):
        return substitute(evaluation)

    word = evaluation.token.text
    try:
        store.insert(word)
    except (PersistenceError, DictionaryFullError) as exc:
        log.error("Could not add %r to dictionary: %s", word, exc)
        return substitute(evaluation)
    return AddedNew(word)
