from libvclpp.preprocessor.defines import expand_defines, substitute_standalone_name
from libvclpp.preprocessor.directives import Definition, Directives


def test_substitute_standalone_name() -> None:
    assert substitute_standalone_name("SET WIDTH", "WIDTH", "4") == "SET 4"


def test_substitute_every_occurrence() -> None:
    assert substitute_standalone_name("FOO(FOO+FOO)", "FOO", "1") == "1(1+1)"


def test_substitute_skips_embedded_names() -> None:
    assert substitute_standalone_name("WIDTHX WIDTH XWIDTH", "WIDTH", "4") == "WIDTHX 4 XWIDTH"


def test_substitute_embedded_name_then_standalone() -> None:
    assert substitute_standalone_name("AAA A", "A", "1") == "AAA 1"


def test_substitute_does_not_rescan_inserted_value() -> None:
    assert substitute_standalone_name("A A", "A", "A A") == "A A A A"


def test_substitute_empty_value() -> None:
    assert substitute_standalone_name("ADD X, Y", "X", "") == "ADD , Y"
    assert substitute_standalone_name("X X X", "X", "") == "  "


def test_substitute_empty_name() -> None:
    assert substitute_standalone_name("NOP", "", "1") == "NOP"


def test_substitute_multi_word_value() -> None:
    line = substitute_standalone_name("MOVE PAIR", "PAIR", "vf01, vf02")
    assert line == "MOVE vf01, vf02"


def test_expand_defines_without_directives() -> None:
    assert expand_defines(["NOP", "ADD vf01"], []) == ["NOP", "ADD vf01"]


def test_expand_defines_compounds_in_order() -> None:
    directives = [
        _definitions(("A", "B")),
        _definitions(("B", "C")),
    ]
    assert expand_defines(["SET A"], directives) == ["SET C"]


def test_expand_defines_reverse_order_does_not_compound() -> None:
    directives = [
        _definitions(("B", "C")),
        _definitions(("A", "B")),
    ]
    assert expand_defines(["SET A"], directives) == ["SET B"]


def test_expand_defines_first_directive_set_wins() -> None:
    directives = [
        _definitions(("FOO", "1")),
        _definitions(("FOO", "2")),
    ]
    assert expand_defines(["SET FOO"], directives) == ["SET 1"]


def test_expand_defines_within_single_set_in_declaration_order() -> None:
    directives = [_definitions(("FOO", "1"), ("FOO", "2"))]
    assert expand_defines(["SET FOO"], directives) == ["SET 1"]


def _definitions(*pairs: tuple[str, str]) -> Directives:
    return Directives(defines=tuple(Definition(name, value) for name, value in pairs))
