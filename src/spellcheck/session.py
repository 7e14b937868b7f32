# spellcheck/session.py
from __future__ import annotations
import enum
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from . import codec
from . import config as CFG
from .DB.api import DictionaryStore
from .channel import LineChannel
from .errors import InputValidationError
from .evaluator import decide, evaluate
from .models import Evaluation, ExactMatch, Session, Token, TokenOutcome
from .ranker import rank

log = logging.getLogger(__name__)


class State(enum.Enum):
    AWAIT_INPUT = "await_input"
    VALIDATE = "validate"
    TOKENIZE = "tokenize"
    EVALUATE_EACH = "evaluate_each"
    RESPOND = "respond"
    CLOSED = "closed"


class SessionCoordinator:
    """
    Runs one spell-check conversation over a LineChannel:

      AWAIT_INPUT -> VALIDATE -> TOKENIZE -> EVALUATE_EACH -> RESPOND -> CLOSED

    Ranking for every token of the line runs in a thread pool; the prompts and
    replies then go over the channel strictly in token order. Any validation
    error answers with its ERROR line and goes straight to CLOSED. The caller
    owns the channel and closes it after run() returns.
    """

    def __init__(self, store: DictionaryStore, *, top_k: Optional[int] = None) -> None:
        self.store = store
        self.top_k = top_k if top_k is not None else CFG.TOP_K
        self.state = State.AWAIT_INPUT

    def run(self, channel: LineChannel) -> Session:
        session = Session()
        try:
            self._run(channel, session)
        finally:
            self.state = State.CLOSED
        return session

    # ------------- states -------------

    def _run(self, channel: LineChannel, session: Session) -> None:
        self.state = State.AWAIT_INPUT
        channel.send(codec.GREETING)
        raw = channel.receive_line()
        if raw is None:
            log.info("Client closed before sending input")
            return
        session.raw = raw

        self.state = State.VALIDATE
        try:
            checked = codec.check_line(raw)
            if checked.has_uppercase:
                channel.send(codec.INFO_UPPERCASE)
            session.normalized = codec.normalize_line(checked)
        except InputValidationError as exc:
            log.info("Rejected input: %s (%s)", type(exc).__name__, exc)
            channel.send(exc.wire_line())
            return

        self.state = State.TOKENIZE
        session.tokens = codec.tokenize(session.normalized)

        self.state = State.EVALUATE_EACH
        evaluations = self._rank_all(session.tokens)
        session.outcomes = [self._resolve(channel, ev) for ev in evaluations]

        self.state = State.RESPOND
        output = self._output(session)
        channel.send(codec.render_transcript(session.raw, output))
        log.info("Session done: %d tokens, output=%r", len(session.tokens), output)

    def _rank_all(self, tokens: List[Token]) -> List[Evaluation]:
        # one worker per token; each future is that token's own result slot
        with ThreadPoolExecutor(max_workers=len(tokens), thread_name_prefix="rank") as pool:
            futures = [pool.submit(evaluate, t, self.store, self.top_k) for t in tokens]
            return [f.result() for f in futures]

    def _resolve(self, channel: LineChannel, ev: Evaluation) -> TokenOutcome:
        if not ev.requires_decision:
            channel.send(codec.render_exact(ev.token, ev.ranked))
            return ExactMatch(ev.token.text)
        # an earlier token (or another connection) may have added the word by now
        if self.store.lookup(ev.token.text):
            ranked = rank(ev.token.text, self.store.snapshot(), self.top_k)
            channel.send(codec.render_exact(ev.token, ranked))
            return ExactMatch(ev.token.text)

        channel.send(codec.render_prompt(ev.token, ev.ranked))
        reply = channel.receive_line()
        outcome = decide(ev, reply, self.store)
        log.debug("WORD %02d %r -> %r", ev.token.index, ev.token.text, outcome)
        return outcome

    def _output(self, session: Session) -> str:
        out = codec.join_output(session.output_words())
        if len(out) > CFG.OUTPUT_CHARACTER_LIMIT:
            log.warning("Output truncated to %d characters", CFG.OUTPUT_CHARACTER_LIMIT)
            out = out[:CFG.OUTPUT_CHARACTER_LIMIT]
        return out
