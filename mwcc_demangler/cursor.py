"""
Read-only view over a mangled symbol with a movable read position.
"""


def is_digit(char: str) -> bool:
    """
    Determine if `char` is a single ASCII decimal digit.
    """
    return len(char) == 1 and char in "0123456789"


class Cursor:
    """
    Cursor over the text of a mangled symbol.

    No operation raises on out-of-range access: reading past the end yields an
    empty string and leaves the position at the end of the text. This lets the
    parser make lookahead decisions without explicit bounds checks.
    """

    def __init__(self, text: str):
        self._text = text
        self.position = 0

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"Cursor({self._text!r}, position={self.position})"

    def at_end(self) -> bool:
        return self.position >= len(self._text)

    def peek(self) -> str:
        """
        Return the current character without consuming it, or "" at the end.
        """
        return self.at(self.position)

    def read(self) -> str:
        """
        Consume and return the current character, or "" at the end.
        """
        char = self.peek()
        if char:
            self.position += 1
        return char

    def at(self, index: int) -> str:
        """
        Absolute indexed read. Returns "" if `index` is out of range.
        """
        if 0 <= index < len(self._text):
            return self._text[index]
        return ""

    def rewind(self):
        """
        Step back a single character.
        """
        assert self.position > 0, "Cannot rewind past the start of the text!"
        self.position -= 1

    def peek_digit(self) -> bool:
        return is_digit(self.peek())

    def read_number(self) -> int:
        """
        Consume subsequent decimal digits and return them as a base-10 integer.
        An empty run of digits reads as zero.
        """
        number = 0
        while self.peek_digit():
            number = number * 10 + int(self.read())
        return number

    def skip(self, count: int):
        """
        Advance by `count` characters, stopping at the end of the text.
        """
        self.position = min(self.position + count, len(self._text))
