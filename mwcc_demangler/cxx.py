"""
Module implementing C++ type abstractions.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from mwcc_demangler.strenum import StrEnum

# Owner type produced for symbols which aren't really mangled, such as the
# compiler-generated `__sinit_*` static initializers.
UNMANGLEABLE_OWNER = "int"
UNMANGLEABLE_PREFIX = f"{UNMANGLEABLE_OWNER}::"


@dataclass(frozen=True)
class Component:
    """
    Represents one token of a parsed type: a modifier, a primitive, or a composite
    (named type, array dimension, function signature).

    This is a variant type, with each `Kind` having different stored data:
    - `NAMED` stores its already rendered text in `name`.
    - `ARRAY` stores the element count of one dimension in `array_dim`.
    - `FUNCTION` stores the rendered parameter list in `params` and the rendered
      return type in `name`.
    """

    class Kind(StrEnum):
        # Qualifiers and modifiers
        CONST = "const"
        POINTER = "*"
        REFERENCE = "&"
        UNSIGNED = "unsigned"
        ELLIPSIS = "..."

        # Primitive types
        VOID = "void"
        BOOL = "bool"
        CHAR = "char"
        WIDE_CHAR = "wchar_t"
        SHORT = "short"
        INT = "int"
        LONG = "long"
        LONG_LONG = "long long"
        FLOAT = "float"
        DOUBLE = "double"

        # Composite types
        NAMED = "named"
        ARRAY = "array"
        FUNCTION = "function"

        def is_named(self) -> bool:
            return self == Component.Kind.NAMED

        def is_array(self) -> bool:
            return self == Component.Kind.ARRAY

        def is_function(self) -> bool:
            return self == Component.Kind.FUNCTION

        def is_composite(self) -> bool:
            return self.is_named() or self.is_array() or self.is_function()

    kind: Kind

    name: str = ""
    params: str = ""
    array_dim: int = 0

    def __post_init__(self):
        """
        Validate the component's contents.
        """
        if self.array_dim:
            assert (
                self.kind.is_array()
            ), f"Non-array component {self.kind.name} cannot have array dimension."

        if self.params:
            assert (
                self.kind.is_function()
            ), f"Non-function component {self.kind.name} cannot have parameters."

        if self.name:
            assert (
                self.kind.is_named() or self.kind.is_function()
            ), f"Component {self.kind.name} cannot carry a name."

    def __str__(self) -> str:
        """
        Print this component as a C token, if it renders on its own.
        """
        if self.kind.is_named():
            return self.name

        assert (
            not self.kind.is_composite()
        ), f"{self.kind.name} components are rendered by ComponentSequence."
        return str(self.kind)

    @staticmethod
    def make_named(name: str) -> "Component":
        return Component(kind=Component.Kind.NAMED, name=name)

    @staticmethod
    def make_array(array_dim: int) -> "Component":
        return Component(kind=Component.Kind.ARRAY, array_dim=array_dim)

    @staticmethod
    def make_function(params: str, return_type: str) -> "Component":
        return Component(kind=Component.Kind.FUNCTION, name=return_type, params=params)


@dataclass
class ComponentSequence:
    """
    Ordered list of the components making up one parsed type.

    Components are pushed to the front as they are parsed, so the base type ends up
    at index 0 and the modifiers wrapping it follow from innermost to outermost.
    """

    components: list[Component] = field(default_factory=list)

    def push(self, component: Component):
        self.components.insert(0, component)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __getitem__(self, index: int) -> Component:
        return self.components[index]

    def render(self, start: int = 0) -> str:
        """
        Render the components from `start` onwards as C++ declaration syntax.

        A space is inserted whenever the component kind changes. Function and array
        components consume the rest of the sequence: whatever follows them wraps
        them, and is rendered inside parentheses (e.g. `void (*)(int)`).
        """
        if start >= len(self.components):
            return ""

        output = ""
        last = self.components[start].kind
        index = start

        while index < len(self.components):
            component = self.components[index]
            if component.kind != last:
                output += " "
                last = component.kind

            if component.kind.is_function():
                wrapped = self.render(index + 1)
                return output + f"{component.name} ({wrapped})({component.params})"

            if component.kind.is_array():
                run_end = index
                while run_end < len(self.components) and self.components[run_end].kind.is_array():
                    run_end += 1

                if run_end < len(self.components):
                    output += f"({self.render(run_end)}) "

                # Dimensions were pushed outer to inner, so the outermost one is last.
                for dim in reversed(self.components[index:run_end]):
                    output += f"[{dim.array_dim}]"
                return output

            output += str(component)
            index += 1

        return output

    def __str__(self) -> str:
        return self.render()


@dataclass
class CxxSymbol:
    """
    Represents a fully demangled symbol.

    `params` is `None` when the symbol carries no function signature at all, and
    the empty string for a function taking no parameters.
    """

    name: str
    owner: str = ""
    params: Optional[str] = None
    is_const: bool = False

    def is_function(self) -> bool:
        return self.params is not None

    def is_unmangleable(self) -> bool:
        """
        Determine if this symbol decoded to the degenerate `int::name` form, which
        means the input was not actually a mangled name.
        """
        return str(self) == f"{UNMANGLEABLE_PREFIX}{self.name}"

    def __str__(self) -> str:
        output = f"{self.owner}::" if self.owner else ""
        output += self.name

        if self.is_function():
            output += f"({self.params})"

        if self.is_const:
            output += " const"

        return output
