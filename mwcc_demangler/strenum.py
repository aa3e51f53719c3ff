"""
String-valued enum base used by the variant kinds.
"""

from enum import Enum


class StrEnum(str, Enum):
    """
    Enum whose members are also strings and print as their value.
    """

    def __str__(self) -> str:
        return self.value
