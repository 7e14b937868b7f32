# spellcheck/errors.py
"""
Exception hierarchy for the spell-check service.

Validation errors carry the exact ``ERROR: ...`` text written to the client
before the connection is closed. Store errors are operator-facing only and are
logged, never echoed to the client.
"""
from __future__ import annotations


class SpellCheckError(Exception):
    """Base class for every error raised by this package."""


class FatalStartupError(SpellCheckError):
    """The dictionary source could not be opened; the process must abort."""


# ---------- per-connection validation ----------

class InputValidationError(SpellCheckError):
    wire_message: str = "ERROR: Invalid input!"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.wire_message)
        self.detail = detail

    def wire_line(self) -> str:
        return self.wire_message + "\n"


class EmptyInputError(InputValidationError):
    wire_message = "ERROR: Input string is empty!"


class InputTooLongError(InputValidationError):
    wire_message = "ERROR: Input string is longer than allowed limit!"


class CleanedInputTooLongError(InputValidationError):
    wire_message = "ERROR: Cleaned input string is longer than allowed limit!"


class UnsupportedCharactersError(InputValidationError):
    wire_message = "ERROR: Input string contains unsupported characters!"


# ---------- dictionary store ----------

class PersistenceError(SpellCheckError):
    """Appending a word to the persisted list failed; nothing was published."""


class DictionaryFullError(SpellCheckError):
    """The store already holds the configured maximum number of entries."""
