import pytest

from libvclpp.preprocessor.directives import Directives, MacroBlock
from libvclpp.preprocessor.errors import (
    MacroArgumentCountMismatchError,
    MacroTooManyArgumentsError,
)
from libvclpp.preprocessor.macros import (
    bind_macro_arguments,
    expand_macros,
    find_macro_invocation,
)

DOUBLE = MacroBlock(name="DOUBLE", params=("x",), body=("  ADD x, x",))
SWAP = MacroBlock(
    name="SWAP",
    params=("a", "b"),
    body=("  MOVE vf00, a", "  MOVE a, b", "  MOVE b, vf00"),
)
CLEAR = MacroBlock(name="CLEAR", body=("  SUB vf01, vf01, vf01", "  SUB vf02, vf02, vf02"))
NOTHING = MacroBlock(name="NOTHING")


def test_expand_single_parameter_macro() -> None:
    lines = expand_macros(["DOUBLE{ 7, }"], [Directives(macros=(DOUBLE,))])
    assert lines == ["", "  ADD 7, 7"]


def test_expand_two_parameters_macro() -> None:
    lines = expand_macros(["SWAP{ vf01, vf02 }"], [Directives(macros=(SWAP,))])
    assert lines == ["", "  MOVE vf00, vf01", "  MOVE vf01, vf02", "  MOVE vf02, vf00"]


def test_expand_parameterless_macro() -> None:
    directives = [Directives(macros=(CLEAR,))]
    assert expand_macros(["CLEAR{}"], directives) == ["", *CLEAR.body]
    assert expand_macros(["  CLEAR{ }"], directives) == ["", *CLEAR.body]


def test_expand_keeps_lines_without_invocation() -> None:
    lines = expand_macros(
        ["NOP", "CALL DOUBLE", "DOUBLE { 1 }", "XDOUBLE{ 1 }"],
        [Directives(macros=(DOUBLE,))],
    )
    assert lines == ["NOP", "CALL DOUBLE", "DOUBLE { 1 }", "XDOUBLE{ 1 }"]


def test_expand_replaces_whole_invocation_line() -> None:
    lines = expand_macros(
        ["NOP", "CLEAR{ }", "NOP"],
        [Directives(macros=(CLEAR,))],
    )
    assert lines == ["NOP", "", *CLEAR.body, "NOP"]


def test_expand_empty_body_expands_into_nothing() -> None:
    lines = expand_macros(["NOP", "NOTHING{ }"], [Directives(macros=(NOTHING,))])
    assert lines == ["NOP"]


def test_expand_empty_body_still_validates_arguments() -> None:
    with pytest.raises(MacroTooManyArgumentsError):
        expand_macros(["NOTHING{ 1 }"], [Directives(macros=(NOTHING,))])


def test_expand_parameters_are_substituted_as_standalone_names() -> None:
    macro = MacroBlock(name="M", params=("x",), body=("  ADD x, xx, x.y",))
    assert expand_macros(["M{ vf01 }"], [Directives(macros=(macro,))]) == [
        "",
        "  ADD vf01, xx, vf01.y",
    ]


def test_expand_body_is_not_rescanned() -> None:
    outer = MacroBlock(name="OUTER", body=("CLEAR{ }",))
    lines = expand_macros(["OUTER{ }"], [Directives(macros=(outer, CLEAR))])
    assert lines == ["", "CLEAR{ }"]


def test_expand_single_invocation_per_line() -> None:
    first = MacroBlock(name="FIRST", params=("a",), body=("first a",))
    second = MacroBlock(name="SECOND", body=("second",))
    directives = [Directives(macros=(first, second))]
    assert expand_macros(["FIRST{ SECOND{} }"], directives) == ["", "first SECOND{}"]


def test_expand_first_directive_set_wins() -> None:
    included = MacroBlock(name="TAG", body=("from include",))
    root = MacroBlock(name="TAG", body=("from root",))
    directives = [Directives(macros=(included,)), Directives(macros=(root,))]
    assert expand_macros(["TAG{ }"], directives) == ["", "from include"]


def test_find_macro_invocation_considers_only_first_name_occurrence() -> None:
    macro = MacroBlock(name="M", body=("NOP",))
    assert find_macro_invocation("MOV M{ }", [Directives(macros=(macro,))]) is None
    assert find_macro_invocation("  M{ }", [Directives(macros=(macro,))]) is macro


def test_bind_arguments_strips_single_separators() -> None:
    macro = MacroBlock(name="M", params=("a", "b", "c"))
    assert bind_macro_arguments("M{ 1, ,2, ,,3,, }", macro) == ["1", "2", ",3,"]


def test_bind_arguments_too_many_for_parameterless() -> None:
    with pytest.raises(MacroTooManyArgumentsError) as e:
        bind_macro_arguments("CLEAR{ vf01 }", CLEAR)
    assert e.value.provided == 1


@pytest.mark.parametrize(
    ("line", "provided"),
    [
        ("SWAP{ vf01 }", 1),
        ("SWAP{ vf01, vf02, vf03 }", 3),
        ("SWAP{}", 0),
    ],
)
def test_bind_arguments_count_mismatch(line: str, provided: int) -> None:
    with pytest.raises(MacroArgumentCountMismatchError) as e:
        bind_macro_arguments(line, SWAP)
    assert e.value.expected == 2
    assert e.value.provided == provided
