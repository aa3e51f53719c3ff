"""
Tests for rendering component sequences.
"""

import pytest

from mwcc_demangler.cxx import Component, ComponentSequence, CxxSymbol


def make_sequence(*components: Component) -> ComponentSequence:
    """
    Build a sequence by pushing the given components in parse order.
    """
    seq = ComponentSequence()
    for component in components:
        seq.push(component)
    return seq


def test_render_modifiers():
    seq = make_sequence(
        Component(kind=Component.Kind.POINTER),
        Component(kind=Component.Kind.CONST),
        Component(kind=Component.Kind.INT),
    )

    assert seq[0].kind == Component.Kind.INT
    assert seq.render() == "int const *"
    assert seq.render(1) == "const *"
    assert seq.render(3) == ""


def test_render_empty():
    assert ComponentSequence().render() == ""
    assert str(ComponentSequence()) == ""


def test_render_fixed_tokens():
    """
    Verify the primitive kinds which the parser never produces still render.
    """
    expected = {
        Component.Kind.BOOL: "bool",
        Component.Kind.CHAR: "char",
        Component.Kind.WIDE_CHAR: "wchar_t",
        Component.Kind.SHORT: "short",
        Component.Kind.LONG: "long",
        Component.Kind.LONG_LONG: "long long",
        Component.Kind.ELLIPSIS: "...",
    }

    for kind, text in expected.items():
        assert make_sequence(Component(kind=kind)).render() == text


def test_render_arrays():
    seq = make_sequence(Component.make_array(4), Component.make_array(3), Component(kind=Component.Kind.INT))
    assert seq.render() == "int [4][3]"

    seq = make_sequence(
        Component(kind=Component.Kind.POINTER),
        Component.make_array(2),
        Component(kind=Component.Kind.CHAR),
    )
    assert seq.render() == "char (*) [2]"


def test_render_functions():
    seq = make_sequence(
        Component(kind=Component.Kind.POINTER),
        Component.make_function("int, float", "void"),
    )
    assert seq.render() == "void (*)(int, float)"

    seq = make_sequence(Component(kind=Component.Kind.REFERENCE), Component.make_function("", "int"))
    assert seq.render() == "int (&)()"


def test_render_named():
    seq = make_sequence(Component(kind=Component.Kind.REFERENCE), Component.make_named("Foo<int, 3>"))
    assert seq.render() == "Foo<int, 3> &"


def test_component_validation():
    with pytest.raises(AssertionError):
        Component(kind=Component.Kind.INT, array_dim=3)

    with pytest.raises(AssertionError):
        Component(kind=Component.Kind.POINTER, params="int")


def test_symbol():
    assert str(CxxSymbol(name="foo")) == "foo"
    assert str(CxxSymbol(name="foo", owner="Bar", params="", is_const=True)) == "Bar::foo() const"
    assert CxxSymbol(name="", owner="int").is_unmangleable()
    assert not CxxSymbol(name="foo", owner="int", params="").is_unmangleable()
