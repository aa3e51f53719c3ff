"""
Module implementing the variant type for mangled type codes.

These variants are mostly used to improve the readability of the parser.
"""

from dataclasses import dataclass
from typing import ClassVar

from mwcc_demangler.cursor import Cursor, is_digit
from mwcc_demangler.cxx import Component
from mwcc_demangler.strenum import StrEnum


@dataclass(frozen=True)
class Token:
    """
    Variant type for individual type codes/tokens.
    """

    class Kind(StrEnum):
        # Abnormal types
        UNKNOWN = "unknown"
        DIGIT = "digit"
        END = "end"

        # Modifiers
        CONST = "C"
        POINTER = "P"
        REFERENCE = "R"
        UNSIGNED = "U"
        ARRAY = "A"
        # Fundamental types
        VOID = "v"
        INT = "i"
        FLOAT = "f"
        DOUBLE = "d"
        # Complex types
        QUALIFIED = "Q"
        FUNCTION = "F"

        # Delimiters
        UNDERSCORE = "_"
        NEGATE = "-"
        TEMPLATE_START = "<"
        TEMPLATE_SEPARATOR = ","
        TEMPLATE_END = ">"

    _MODIFIER_MAP: ClassVar[dict[Kind, Component.Kind]] = {
        Kind.CONST: Component.Kind.CONST,
        Kind.POINTER: Component.Kind.POINTER,
        Kind.REFERENCE: Component.Kind.REFERENCE,
        Kind.UNSIGNED: Component.Kind.UNSIGNED,
    }
    _PRIM_MAP: ClassVar[dict[Kind, Component.Kind]] = {
        Kind.VOID: Component.Kind.VOID,
        Kind.INT: Component.Kind.INT,
        Kind.FLOAT: Component.Kind.FLOAT,
        Kind.DOUBLE: Component.Kind.DOUBLE,
    }

    kind: Kind
    content: str

    def is_modifier(self) -> bool:
        """
        Determine if this is a modifier code (const, pointer, reference, unsigned).
        """
        return self.kind in self._MODIFIER_MAP

    def is_primitive(self) -> bool:
        """
        Determine if this is a fundamental primitive type.
        """
        return self.kind in self._PRIM_MAP

    def is_digit(self) -> bool:
        return self.kind == Token.Kind.DIGIT

    def is_end(self) -> bool:
        return self.kind == Token.Kind.END

    def starts_literal(self) -> bool:
        """
        Determine if this code begins a number: either a literal value or the
        length prefix of a name.
        """
        return self.kind in [Token.Kind.DIGIT, Token.Kind.NEGATE]

    def ends_template_arg(self) -> bool:
        """
        Determine if this code terminates a template argument.
        """
        return self.kind in [
            Token.Kind.TEMPLATE_SEPARATOR,
            Token.Kind.TEMPLATE_END,
            Token.Kind.END,
        ]

    def get_component(self) -> Component:
        """
        If this is a modifier or primitive type, return an equivalent `Component`.
        Otherwise, throw an error.
        """
        if self.is_modifier():
            return Component(kind=self._MODIFIER_MAP[self.kind])
        return Component(kind=self._PRIM_MAP[self.kind])

    def __bool__(self) -> bool:
        return self.kind != Token.Kind.END

    def __str__(self) -> str:
        return self.content

    @staticmethod
    def from_char(char: str) -> "Token":
        """
        Construct this variant with the given character and determine its type code.
        The empty string denotes the end of the input.
        """
        if not char:
            return Token(kind=Token.Kind.END, content="")

        try:
            kind = Token.Kind(char)
        except ValueError:
            kind = Token.Kind.DIGIT if is_digit(char) else Token.Kind.UNKNOWN

        return Token(kind=kind, content=char)

    @staticmethod
    def peek(src: Cursor) -> "Token":
        """
        Construct this variant by peeking the next character of the cursor.
        The cursor is not modified.
        """
        return Token.from_char(src.peek())

    @staticmethod
    def read(src: Cursor) -> "Token":
        """
        Construct this variant by reading the next character of the cursor.
        At the end of the input, an `END` token is returned.
        """
        return Token.from_char(src.read())
