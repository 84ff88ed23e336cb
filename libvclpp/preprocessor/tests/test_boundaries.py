from libvclpp.preprocessor.boundaries import (
    is_macro_invocation,
    is_standalone_identifier,
)


def test_standalone_identifier_whole_line() -> None:
    assert is_standalone_identifier("FOO", 0, 3)


def test_standalone_identifier_surrounded_by_whitespace() -> None:
    assert is_standalone_identifier("SET FOO 1", 4, 3)
    assert is_standalone_identifier("SET\tFOO", 4, 3)


def test_standalone_identifier_surrounded_by_punctuation() -> None:
    line = "func(FOO+42);"
    assert is_standalone_identifier(line, line.find("FOO"), 3)


def test_standalone_identifier_prefix_of_longer_word() -> None:
    assert not is_standalone_identifier("FOOBAR", 0, 3)
    assert not is_standalone_identifier("SET FOOBAR", 4, 3)


def test_standalone_identifier_suffix_of_longer_word() -> None:
    assert not is_standalone_identifier("XFOO", 1, 3)
    assert not is_standalone_identifier("SET XFOO, 1", 5, 3)


def test_standalone_identifier_after_underscore() -> None:
    # Underscore separates words like any other punctuation
    assert is_standalone_identifier("MY_FOO", 3, 3)
    assert is_standalone_identifier("FOO_BAR", 0, 3)


def test_macro_invocation_at_line_start() -> None:
    assert is_macro_invocation("M{ 1 }", 0, 1)
    assert is_macro_invocation("M{}", 0, 1)


def test_macro_invocation_after_indentation_or_punctuation() -> None:
    assert is_macro_invocation("    LOOP{ }", 4, 4)
    assert is_macro_invocation("(LOOP{ }", 1, 4)


def test_macro_invocation_requires_glued_mark() -> None:
    assert not is_macro_invocation("M { 1 }", 0, 1)
    assert not is_macro_invocation("M(1)", 0, 1)


def test_macro_invocation_at_line_end_is_not_invocation() -> None:
    assert not is_macro_invocation("CALL M", 5, 1)


def test_macro_invocation_inside_longer_word() -> None:
    assert not is_macro_invocation("XM{ }", 1, 1)
