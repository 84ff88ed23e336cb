"""Token boundary predicates.

Preprocessor has no lexer, so names are searched as raw substrings.
These decide whether a found substring is a real standalone occurrence,
so `#define FOO` is never expanded inside `FOOBAR` or `XFOO`.
Underscore is punctuation here, so `FOO` within `MY_FOO` is still standalone.
"""

from string import punctuation

from .keywords import MACRO_INVOCATION_MARK


def is_boundary_character(symbol: str) -> bool:
    """Is given character separates words (whitespace or punctuation)."""
    return symbol.isspace() or symbol in punctuation


def is_standalone_identifier(line: str, pos: int, length: int) -> bool:
    """Is match of `length` at `pos` surrounded by line edges, whitespace or punctuation."""
    before, after = pos - 1, pos + length
    if before >= 0 and not is_boundary_character(line[before]):
        return False
    return after >= len(line) or is_boundary_character(line[after])


def is_macro_invocation(line: str, pos: int, length: int) -> bool:
    """Is match of `length` at `pos` an macro invocation (e.g `NAME{`).

    Invocation mark must be glued to the name, name at the end of line is never an invocation.
    """
    before, after = pos - 1, pos + length
    if after >= len(line) or line[after] != MACRO_INVOCATION_MARK:
        return False
    return before < 0 or is_boundary_character(line[before])
