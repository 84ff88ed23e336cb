from __future__ import annotations

from typing import TYPE_CHECKING

from libvclpp.preprocessor.boundaries import is_macro_invocation
from libvclpp.preprocessor.defines.expander import substitute_standalone_name
from libvclpp.preprocessor.errors import (
    MacroArgumentCountMismatchError,
    MacroTooManyArgumentsError,
)
from libvclpp.preprocessor.keywords import MACRO_PARAMETERS_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from libvclpp.preprocessor.directives import Directives, MacroBlock
    from libvclpp.preprocessor.location import SourceLocation

# Invocation line always has macro name (with opening mark) and closing mark words
# e.g `NAME{ a, b }` -> [`NAME{`, `a,`, `b`, `}`]
INVOCATION_SURROUNDING_WORDS = 2


def expand_macros(
    lines: Iterable[str],
    directives: Sequence[Directives],
    locations: Sequence[SourceLocation] | None = None,
) -> list[str]:
    """Replace each line containing an macro invocation with expanded macro body.

    Only single (first found) invocation per line is recognized,
    expanded bodies are not re-scanned for another invocations.
    Expanded body is preceded with an blank line, empty body expands into nothing.

    :param locations: Where each of given lines is found, used for invocation errors only.
    """
    expanded: list[str] = []
    for index, line in enumerate(lines):
        macro = find_macro_invocation(line, directives)
        if macro is None:
            expanded.append(line)
            continue
        at = locations[index] if locations else None
        expanded.extend(expand_macro_invocation(line, macro, at=at))
    return expanded


def find_macro_invocation(
    line: str,
    directives: Sequence[Directives],
) -> MacroBlock | None:
    """Search for first macro (in directive sets order, then declaration order) invoked at given line.

    Only first occurrence of each macro name within the line is considered.
    """
    for directive_set in directives:
        for macro in directive_set.macros:
            pos = line.find(macro.name)
            if pos != -1 and is_macro_invocation(line, pos, len(macro.name)):
                return macro
    return None


def expand_macro_invocation(
    line: str,
    macro: MacroBlock,
    *,
    at: SourceLocation | None = None,
) -> list[str]:
    """Expand single invocation line of given macro into resulting lines."""
    arguments = bind_macro_arguments(line, macro, at=at)
    if not macro.body:
        return []

    body = list(macro.body)
    for param, argument in zip(macro.params, arguments, strict=True):
        body = [
            substitute_standalone_name(body_line, param, argument)
            for body_line in body
        ]
    return ["", *body]


def bind_macro_arguments(
    line: str,
    macro: MacroBlock,
    *,
    at: SourceLocation | None = None,
) -> list[str]:
    """Validate invocation arguments count and get arguments stripped from separators."""
    words = line.split()
    provided = max(len(words) - INVOCATION_SURROUNDING_WORDS, 0)

    if not macro.params:
        if provided > 0:
            raise MacroTooManyArgumentsError(
                macro=macro,
                provided=provided,
                line=line,
                at=at,
            )
        return []

    if provided != len(macro.params):
        raise MacroArgumentCountMismatchError(
            macro=macro,
            provided=provided,
            line=line,
            at=at,
        )

    arguments = words[1 : 1 + len(macro.params)]
    return [_strip_argument_separators(argument) for argument in arguments]


def _strip_argument_separators(argument: str) -> str:
    """Strip single leading and single trailing comma from an argument."""
    return argument.removesuffix(MACRO_PARAMETERS_SEPARATOR).removeprefix(
        MACRO_PARAMETERS_SEPARATOR,
    )
