"""
Tests for the cursor and token variants.
"""

from mwcc_demangler.cursor import Cursor
from mwcc_demangler.cxx import Component
from mwcc_demangler.token import Token


def test_read_past_end():
    src = Cursor("ab")

    assert src.read() == "a"
    assert src.read() == "b"
    assert src.read() == ""
    assert src.read() == ""
    assert src.position == 2
    assert src.at_end()


def test_peek_and_at():
    src = Cursor("abc")

    assert src.peek() == "a"
    assert src.position == 0
    assert src.at(2) == "c"
    assert src.at(3) == ""
    assert src.at(-1) == ""
    assert len(src) == 3

    assert Cursor("").peek() == ""


def test_rewind_and_skip():
    src = Cursor("abcd")
    src.read()
    src.rewind()
    assert src.position == 0

    src.skip(3)
    assert src.peek() == "d"
    src.skip(5)
    assert src.position == 4


def test_read_number():
    src = Cursor("123abc")
    assert src.read_number() == 123
    assert src.peek() == "a"

    assert Cursor("abc").read_number() == 0
    assert Cursor("").read_number() == 0


def test_tokens():
    """
    Verify that characters are classified as the expected type codes.
    """
    assert Token.from_char("").is_end()
    assert not Token.from_char("")
    assert Token.from_char("7").is_digit()
    assert Token.from_char("x").kind == Token.Kind.UNKNOWN
    assert Token.from_char("Q").kind == Token.Kind.QUALIFIED

    assert Token.from_char("C").is_modifier()
    assert Token.from_char("C").get_component() == Component(kind=Component.Kind.CONST)
    assert Token.from_char("d").is_primitive()
    assert Token.from_char("d").get_component() == Component(kind=Component.Kind.DOUBLE)

    assert Token.from_char("-").starts_literal()
    assert Token.from_char(">").ends_template_arg()
    assert Token.from_char("").ends_template_arg()
    assert not Token.from_char("F").ends_template_arg()

    src = Cursor("P")
    assert Token.peek(src).kind == Token.Kind.POINTER
    assert Token.read(src).kind == Token.Kind.POINTER
    assert Token.read(src).is_end()


def test_non_ascii_digits():
    src = Cursor("٣1")
    assert not src.peek_digit()
    assert src.read_number() == 0
    assert src.position == 0

    assert Token.from_char("٣").kind == Token.Kind.UNKNOWN
    assert Cursor("7").peek_digit()
