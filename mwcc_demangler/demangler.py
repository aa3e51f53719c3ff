"""
Demangler for Metrowerks (CodeWarrior) style C++ symbols.

This scheme predates the Itanium `_Z` ABI: a symbol is the function name,
a `__` separator, the owning class, and an optional `F`-prefixed signature,
e.g. `Update__Q23Foo3BarCFPCi` -> `Foo::Bar::Update(int const *) const`.
"""

import logging
from typing import Union

from mwcc_demangler.cursor import Cursor
from mwcc_demangler.cxx import Component, ComponentSequence, CxxSymbol
from mwcc_demangler.token import Token

LOGGER = logging.getLogger(__name__)


class MWDemangler:
    """
    Demangler object.

    The parser keeps no state between calls; every method works off the cursor
    that is passed in.
    """

    def parse(self, symbol: str) -> CxxSymbol:
        """
        Parse the given symbol. This never fails: malformed input produces a
        best-effort symbol instead.
        """
        src = Cursor(symbol)

        name = self.split_name(src)

        owner = ""
        if not src.at_end() and Token.peek(src).kind != Token.Kind.FUNCTION:
            owner = self.demangle_type(src)

        is_const = False
        if Token.peek(src).kind == Token.Kind.CONST:
            src.read()
            is_const = True

        params = None
        if Token.peek(src).kind == Token.Kind.FUNCTION:
            src.read()
            args = []
            while not src.at_end():
                args.append(self.demangle_type(src))
            params = ", ".join(args)

        sym = CxxSymbol(name=name, owner=owner, params=params, is_const=is_const)
        if sym.is_unmangleable():
            LOGGER.debug("symbol %r does not appear to be mangled", symbol)
        return sym

    def split_name(self, src: Cursor) -> str:
        """
        Read the base identifier of a symbol, leaving the cursor on its signature.

        The identifier ends at the right-most `__` of the remaining text (or at the
        end of the text if there is none), since templated names and operators may
        contain `__` themselves. The separator is consumed.
        """
        end = len(src)
        for i in range(src.position, len(src) - 1):
            if src.at(i) == "_" and src.at(i + 1) == "_":
                end = i

        name = ""
        while src.position < end:
            tok = Token.read(src)
            if tok.kind == Token.Kind.TEMPLATE_START:
                name += self.parse_template_args(src)
            else:
                name += str(tok)

        if end < len(src):
            # Skip the separator.
            src.skip(2)

        return name

    def parse_type(self, src: Cursor) -> Union[ComponentSequence, str]:
        """
        Parse a single type.

        Numbers are either literal template values or the length prefix of a name,
        and come back as text. Anything else is parsed into a `ComponentSequence`.
        """
        if Token.peek(src).starts_literal():
            return self._demangle_literal_or_name(src)
        return self._demangle_components(src)

    def demangle_type(self, src: Cursor) -> str:
        """
        Parse a single type and render it.
        """
        return str(self.parse_type(src))

    def parse_template_args(self, src: Cursor) -> str:
        """
        Parse a template argument list. The opening `<` must already be consumed.
        """
        args = []
        while True:
            args.append(self.demangle_type(src))
            if Token.read(src).kind != Token.Kind.TEMPLATE_SEPARATOR:
                # Either `>` or the end of the input.
                break

        return f"<{', '.join(args)}>"

    def _demangle_literal_or_name(self, src: Cursor) -> str:
        """
        Demangle a number: a (possibly negative) literal if it is followed by a
        template delimiter or the end of the input, otherwise the length of the name
        which follows it.
        """
        negative = False
        if Token.peek(src).kind == Token.Kind.NEGATE:
            src.read()
            negative = True

        number = src.read_number()

        if negative or Token.peek(src).ends_template_arg():
            return str(-number if negative else number)

        name = ""
        start = src.position
        while src.position - start < number and not src.at_end():
            tok = Token.read(src)
            if tok.kind == Token.Kind.TEMPLATE_START:
                name += self.parse_template_args(src)
            else:
                name += str(tok)

        return name

    def _demangle_components(self, src: Cursor) -> ComponentSequence:
        """
        Read type codes until a terminal type is found, prepending a component for
        each one.
        """
        components = ComponentSequence()

        while True:
            tok = Token.read(src)

            if tok.is_end():
                break

            elif tok.is_modifier():
                components.push(tok.get_component())

            elif tok.kind == Token.Kind.ARRAY:
                components.push(self._demangle_array_dim(src))

            elif tok.is_primitive():
                components.push(tok.get_component())
                break

            elif tok.kind == Token.Kind.QUALIFIED:
                components.push(self._demangle_qualified(src))
                break

            elif tok.kind == Token.Kind.FUNCTION:
                components.push(self._demangle_function(src))
                break

            elif tok.is_digit():
                # A length-prefixed class name.
                src.rewind()
                components.push(Component.make_named(self.demangle_type(src)))
                break

            # Any other code is skipped.

        return components

    def _demangle_array_dim(self, src: Cursor) -> Component:
        """
        Demangle the dimension of an array, terminated by `_`. The `A` must already
        be consumed.
        """
        array_dim = 0
        tok = Token.read(src)
        while tok and tok.kind != Token.Kind.UNDERSCORE:
            if tok.is_digit():
                array_dim = array_dim * 10 + int(tok.content)
            tok = Token.read(src)

        return Component.make_array(array_dim)

    def _demangle_qualified(self, src: Cursor) -> Component:
        """
        Demangle a qualified name, e.g. `Q23Foo3Bar` -> `Foo::Bar`. The `Q` must
        already be consumed.
        """
        tok = Token.read(src)
        count = int(tok.content) if tok.is_digit() else 0

        names = [self.demangle_type(src) for _ in range(count)]
        return Component.make_named("::".join(names))

    def _demangle_function(self, src: Cursor) -> Component:
        """
        Demangle a function type: its parameters, a `_`, then its return type.
        The `F` must already be consumed.
        """
        args = []
        while Token.peek(src) and Token.peek(src).kind != Token.Kind.UNDERSCORE:
            args.append(self.demangle_type(src))

        # Consume the `_`.
        src.read()
        return_type = self.demangle_type(src)

        params = ", ".join(args)
        if params == "void":
            params = ""

        return Component.make_function(params, return_type)


def parse(mangled: str) -> CxxSymbol:
    p = MWDemangler()
    result = p.parse(mangled)
    return result


def demangle(mangled: str) -> str:
    try:
        return str(parse(mangled))
    except RecursionError:
        LOGGER.debug("symbol %r is nested too deeply to demangle", mangled)
        return mangled


def demangle_or_raw(mangled: str) -> str:
    """
    Demangle the given symbol, falling back to the symbol itself if it decodes to
    the degenerate `int::name` form.
    """
    try:
        sym = parse(mangled)
        if sym.is_unmangleable():
            return mangled
        return str(sym)
    except RecursionError:
        LOGGER.debug("symbol %r is nested too deeply to demangle", mangled)
        return mangled
