from __future__ import annotations
import string

_ALPHA = frozenset(string.ascii_letters)
_SPACE = frozenset(string.whitespace)


def normalize_word(text: str) -> str:
    """Trim surrounding whitespace and lowercase. Shared by loader, store and codec."""
    return text.strip().lower()


def is_allowed_char(ch: str) -> bool:
    """Only ASCII letters and whitespace may appear in an input line."""
    return ch in _ALPHA or ch in _SPACE


def is_alpha_word(text: str) -> bool:
    return bool(text) and all(ch in _ALPHA for ch in text)


def has_uppercase(text: str) -> bool:
    return any("A" <= ch <= "Z" for ch in text)
