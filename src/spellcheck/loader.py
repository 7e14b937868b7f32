"""
Dictionary Loading Module

Reads the persisted word list into memory at startup. Each line holds one
word; surrounding whitespace is trimmed and the word is lowercased with the
same normalize_word() routine the store and the codec use, so lookups and
ranking always compare like with like.

Rules:
    1. Empty (or whitespace-only) lines are discarded.
    2. Lines longer than MAX_WORD_LENGTH after trimming are skipped.
    3. An unreadable source aborts startup with FatalStartupError.

Duplicates and the DICT_SIZE cap are enforced by the store when it is seeded.
"""

# spellcheck/loader.py
from __future__ import annotations
import logging
from typing import List

from . import config as CFG
from .errors import FatalStartupError
from .normalize import normalize_word

log = logging.getLogger(__name__)


def load_dictionary(path: str) -> List[str]:
    """
    Load the word list at `path`, in file order.

    Args:
        path: Path of the flat word list

    Returns:
        List[str]: Normalized, non-empty words (may contain duplicates)

    Raises:
        FatalStartupError: If the file cannot be opened or read

    Example:
        >>> load_dictionary("basic_english_2000.txt")[:3]
        ['a', 'able', 'about']
    """
    words: List[str] = []
    skipped = 0
    try:
        with open(path, "r", encoding=CFG.ENCODING, errors="replace") as f:
            for line_no, raw in enumerate(f, start=1):
                w = normalize_word(raw)
                if not w:
                    continue
                if len(w) > CFG.MAX_WORD_LENGTH:
                    log.warning("%s:%d: entry longer than %d characters skipped",
                                path, line_no, CFG.MAX_WORD_LENGTH)
                    skipped += 1
                    continue
                words.append(w)
    except OSError as exc:
        raise FatalStartupError(f"Error opening dictionary file {path}: {exc}") from exc

    log.info("Loaded %d words from %s (%d skipped)", len(words), path, skipped)
    return words
