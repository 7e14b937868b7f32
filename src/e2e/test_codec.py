import pytest

from spellcheck import codec
from spellcheck.errors import (
    EmptyInputError,
    InputTooLongError,
    UnsupportedCharactersError,
)
from spellcheck.models import RankedList, Token


@pytest.mark.parametrize("raw", ["", "   ", "\t"])
def test_empty_input_is_rejected(raw):
    with pytest.raises(EmptyInputError):
        codec.check_line(raw)


def test_length_bound():
    codec.check_line("a" * 100)
    with pytest.raises(InputTooLongError):
        codec.check_line("a" * 101)


@pytest.mark.parametrize("raw", ["hello world1", "hello, world", "café", "a-b"])
def test_unsupported_characters(raw):
    with pytest.raises(UnsupportedCharactersError) as ei:
        codec.check_line(raw)
    assert ei.value.wire_line() == "ERROR: Input string contains unsupported characters!\n"


def test_length_is_checked_before_characters():
    with pytest.raises(InputTooLongError):
        codec.check_line("1" * 101)


def test_normalize_and_tokenize():
    checked = codec.check_line("  Hello   WORLD\tfoo ")
    assert checked.has_uppercase
    normalized = codec.normalize_line(checked)
    assert normalized == "hello   world\tfoo"
    assert codec.tokenize(normalized) == [Token(1, "hello"), Token(2, "world"), Token(3, "foo")]


def test_strip_terminator():
    assert codec.strip_terminator("caat\r\n") == "caat"
    assert codec.strip_terminator("caat") == "caat"
    assert codec.strip_terminator("a\nb") == "a"


@pytest.mark.parametrize("reply,expected", [
    ("y", True), ("Y", True), ("yes", True), ("n", False), ("", False), (None, False), (" y", False),
])
def test_affirmative(reply, expected):
    assert codec.is_affirmative(reply) is expected


def test_render_prompt_and_exact():
    ranked = RankedList(5)
    ranked.offer("cat", 1)
    ranked.offer("hat", 2)
    tok = Token(1, "caat")
    assert codec.render_prompt(tok, ranked) == (
        "WORD 01: caat\nMATCHES: cat (1), hat (2)\n"
        "WORD not in dictionary. Do you want to add this word to dictionary? (y/N): "
    )
    assert codec.render_exact(Token(12, "cat"), ranked).startswith("WORD 12: cat\n")
    assert codec.render_exact(Token(12, "cat"), ranked).endswith("Correct word!\n")


def test_render_empty_matches_and_transcript():
    assert codec.render_matches(RankedList(5)) == "MATCHES: \n"
    assert codec.render_transcript("Caat", "cat") == "\nINPUT: Caat\nOUTPUT: cat\n"
