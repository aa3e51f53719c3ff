"""
Python package which implements a demangler for Metrowerks (CodeWarrior) C++ symbols.
"""

from mwcc_demangler.cursor import Cursor
from mwcc_demangler.cxx import (
    UNMANGLEABLE_OWNER,
    UNMANGLEABLE_PREFIX,
    Component,
    ComponentSequence,
    CxxSymbol,
)
from mwcc_demangler.demangler import MWDemangler, demangle, demangle_or_raw, parse

__all__ = [
    "parse",
    "demangle",
    "demangle_or_raw",
    "MWDemangler",
    "Component",
    "ComponentSequence",
    "Cursor",
    "CxxSymbol",
    "UNMANGLEABLE_OWNER",
    "UNMANGLEABLE_PREFIX",
]
