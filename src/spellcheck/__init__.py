"""
Spell-Check Server Module

This module provides an interactive, line-oriented spell-checking service. A
client sends one line of words; every word is either found in the dictionary
or ranked against it by edit distance, and for each unknown word the client
is asked whether to add it. The server answers with the line rewritten: added
and known words stay, declined words become their closest dictionary match.

The module is designed with a clean separation of concerns:
- Dictionary loading and storage (flat append-only word list)
- Edit-distance ranking with a bounded, deterministic candidate list
- Per-token evaluation and the interactive accept/decline decision
- Per-connection session handling over a plain-text line protocol

Main Objects:
    Engine: build the store, run sessions, serve TCP connections
    levenshtein(a, b): unit-cost edit distance
    rank(token, words, k): top-k closest words

Example Usage:
    from spellcheck import Engine

    eng = Engine().build("basic_english_2000.txt")
    print(eng.check("helo wrld")["output"])
    eng.serve(port=60000)
"""

# src/spellcheck/__init__.py
from .engine import Engine
from .ranker import levenshtein, rank

__version__ = "1.0.0"
__all__ = ["Engine", "levenshtein", "rank"]
