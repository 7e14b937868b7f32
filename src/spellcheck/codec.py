# spellcheck/codec.py
"""
Line protocol codec.

Validation runs as named steps, each raising its own InputValidationError
subclass so the session can answer with the matching ``ERROR:`` line:

    check_line(raw)        empty -> too long -> unsupported characters
    normalize_line(line)   trim + lowercase, then the length bound again

tokenize() works on the normalized string only. The render_* helpers build
every server -> client message of the protocol.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from . import config as CFG
from .errors import (
    EmptyInputError,
    InputTooLongError,
    CleanedInputTooLongError,
    UnsupportedCharactersError,
)
from .models import RankedList, Token
from .normalize import is_allowed_char, has_uppercase, normalize_word

GREETING = "Welcome to Text Analysis Server!\nEnter your string:\n"
INFO_UPPERCASE = "INFO: Input contained uppercase letters. Converted to lowercase.\n"
CORRECT_WORD = "Correct word!\n"
ADD_PROMPT = "WORD not in dictionary. Do you want to add this word to dictionary? (y/N): "


@dataclass(frozen=True, slots=True)
class CheckedLine:
    raw: str
    has_uppercase: bool


def strip_terminator(line: str) -> str:
    """Drop everything from the first CR or LF on, like the line reader would."""
    for i, ch in enumerate(line):
        if ch in "\r\n":
            return line[:i]
    return line


def check_line(raw: str) -> CheckedLine:
    if not raw.strip():
        raise EmptyInputError()
    if len(raw) > CFG.INPUT_CHARACTER_LIMIT:
        raise InputTooLongError(f"{len(raw)} > {CFG.INPUT_CHARACTER_LIMIT}")
    bad = next((ch for ch in raw if not is_allowed_char(ch)), None)
    if bad is not None:
        raise UnsupportedCharactersError(f"unsupported character {bad!r}")
    return CheckedLine(raw=raw, has_uppercase=has_uppercase(raw))


def normalize_line(line: CheckedLine) -> str:
    normalized = normalize_word(line.raw)
    # lowercasing ASCII never changes the length; the bound is still checked
    if len(normalized) > CFG.INPUT_CHARACTER_LIMIT:
        raise CleanedInputTooLongError(f"{len(normalized)} > {CFG.INPUT_CHARACTER_LIMIT}")
    return normalized


def tokenize(normalized: str) -> List[Token]:
    return [Token(index=i, text=t) for i, t in enumerate(normalized.split(), start=1)]


def is_affirmative(reply: str | None) -> bool:
    return bool(reply) and reply[0] in ("y", "Y")


# ---------- rendering ----------

def render_matches(ranked: RankedList) -> str:
    return "MATCHES: " + ", ".join(f"{c.word} ({c.distance})" for c in ranked) + "\n"


def render_word_block(token: Token, ranked: RankedList) -> str:
    return f"WORD {token.index:02d}: {token.text}\n" + render_matches(ranked)


def render_exact(token: Token, ranked: RankedList) -> str:
    return render_word_block(token, ranked) + CORRECT_WORD


def render_prompt(token: Token, ranked: RankedList) -> str:
    return render_word_block(token, ranked) + ADD_PROMPT


def join_output(words: Iterable[str]) -> str:
    return " ".join(words)


def render_transcript(raw: str, output: str) -> str:
    return f"\nINPUT: {raw}\nOUTPUT: {output}\n"
