from __future__ import annotations

from typing import TYPE_CHECKING

from ._state import ParserMode, ParserState
from .directives import Definition, MacroBlock
from .errors import (
    DirectiveInsideMacroBlockError,
    MacroDoubleCommaError,
    MacroLostCommaError,
    MacroMissingCommaError,
    MacroTrailingCommaError,
    MacroUnexpectedDeclarationTextError,
    MalformedIncludePathError,
    MissingDirectiveArgumentError,
    UnknownDirectiveError,
    UnterminatedMacroBlockError,
)
from .io import read_source_file_lines
from .keywords import (
    DIRECTIVE_MARK,
    INCLUDE_PATH_QUOTE,
    MACRO_PARAMETERS_MARK,
    MACRO_PARAMETERS_SEPARATOR,
    SINGLE_LINE_COMMENT,
    WORD_TO_DIRECTIVE_KEYWORD,
    DirectiveKeyword,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from .directives import ParsedSource

END_MACRO_LINE = "#endmacro"


def parse_source_file(path: Path, *, is_include: bool = False) -> ParsedSource:
    """Read and parse given file into its directives and residual code lines."""
    lines = read_source_file_lines(path)
    return parse_source_lines(path, lines, is_include=is_include)


def parse_source_lines(
    path: Path,
    lines: Iterable[str],
    *,
    is_include: bool = False,
) -> ParsedSource:
    """Parse stream of lines of single file into directives and code lines.

    Blank lines are skipped in any state, pure comment lines (starting with `;`) are dropped.
    Path is used only for error reporting and warnings.

    :param is_include: Parse in include mode, program markers (`#vuprog`) are not expected then.
    """
    state = ParserState(path=path, is_include=is_include)

    for row, line in enumerate(lines, start=1):
        state.row = row
        if is_blank_line(line):
            continue

        match state.mode:
            case ParserMode.INSIDE_MACRO_BLOCK:
                _consume_macro_block_line(line, state)
            case ParserMode.NORMAL:
                _consume_normal_line(line, state)

    if state.mode == ParserMode.INSIDE_MACRO_BLOCK:
        assert state.macro_header is not None
        assert state.macro_header.location is not None
        raise UnterminatedMacroBlockError(
            macro_name=state.macro_header.name,
            opened_at=state.macro_header.location,
        )

    return state.into_parsed_source()


def is_blank_line(line: str) -> bool:
    return not line or line.isspace()


def _consume_macro_block_line(line: str, state: ParserState) -> None:
    """Close current macro block or append verbatim line to its body."""
    if line == END_MACRO_LINE:
        state.close_macro_block()
        return

    if line.startswith(DIRECTIVE_MARK):
        assert state.macro_header is not None
        raise DirectiveInsideMacroBlockError(
            line=line,
            macro_name=state.macro_header.name,
            at=state.current_location(),
        )

    state.macro_body.append(line)


def _consume_normal_line(line: str, state: ParserState) -> None:
    """Collect code line or dispatch directive by its first word."""
    if not line.startswith(DIRECTIVE_MARK):
        if not line.startswith(SINGLE_LINE_COMMENT):
            state.code_lines.append(line)
            state.code_locations.append(state.current_location())
        return

    tokens = line.split()
    match WORD_TO_DIRECTIVE_KEYWORD.get(tokens[0]):
        case DirectiveKeyword.INCLUDE:
            state.includes.append(_consume_include_directive(tokens, state))
            state.include_locations.append(state.current_location())
        case DirectiveKeyword.DEFINE:
            state.defines.append(_consume_define_directive(tokens, state))
        case DirectiveKeyword.MACRO:
            state.open_macro_block(_consume_macro_header(tokens, state))
        case DirectiveKeyword.PROGRAM_START:
            state.found_program_start = True
        case DirectiveKeyword.PROGRAM_END:
            state.found_program_end = True
        case _:
            # `#endmacro` outside of macro block is also unknown here
            raise UnknownDirectiveError(
                directive=tokens[0],
                at=state.current_location(),
            )


def _consume_include_directive(tokens: Sequence[str], state: ParserState) -> str:
    """Consume `#include "path"` into unquoted path."""
    path = _expect_directive_argument(tokens, "include path", state)

    is_quoted = (
        len(path) > len(INCLUDE_PATH_QUOTE) * 2
        and path.startswith(INCLUDE_PATH_QUOTE)
        and path.endswith(INCLUDE_PATH_QUOTE)
    )
    if not is_quoted:
        raise MalformedIncludePathError(path=path, at=state.current_location())

    return path.removeprefix(INCLUDE_PATH_QUOTE).removesuffix(INCLUDE_PATH_QUOTE)


def _consume_define_directive(
    tokens: Sequence[str],
    state: ParserState,
) -> Definition:
    """Consume `#define NAME value...` where value is all remaining words."""
    name = _expect_directive_argument(tokens, "name", state)
    return Definition(
        name=name,
        value=" ".join(tokens[2:]),
        location=state.current_location(),
    )


def _consume_macro_header(tokens: Sequence[str], state: ParserState) -> MacroBlock:
    """Consume `#macro NAME` or `#macro NAME: p1, p2, ...` header of an macro block."""
    name = _expect_directive_argument(tokens, "name", state)
    location = state.current_location()

    if not name.endswith(MACRO_PARAMETERS_MARK):
        trailing = tokens[2:]
        if trailing and not trailing[0].startswith(SINGLE_LINE_COMMENT):
            raise MacroUnexpectedDeclarationTextError(
                macro_name=name,
                text=" ".join(trailing),
                at=location,
            )
        return MacroBlock(name=name, location=location)

    name = name.removesuffix(MACRO_PARAMETERS_MARK)
    if not name:
        raise MissingDirectiveArgumentError(
            directive=tokens[0],
            expected="name",
            at=location,
        )

    params = _consume_macro_parameters(name, tokens[2:], state)
    return MacroBlock(name=name, params=params, location=location)


def _consume_macro_parameters(
    name: str,
    tokens: Sequence[str],
    state: ParserState,
) -> tuple[str, ...]:
    """Consume comma separated parameter list, each separator is glued to previous parameter."""
    params: list[str] = []
    last_index = len(tokens) - 1

    for index, param in enumerate(tokens):
        is_last = index == last_index

        if param == MACRO_PARAMETERS_SEPARATOR:
            # Lost comma from an editing error
            raise MacroLostCommaError(macro_name=name, at=state.current_location())

        if param.endswith(MACRO_PARAMETERS_SEPARATOR):
            param = param.removesuffix(MACRO_PARAMETERS_SEPARATOR)
            if is_last:
                raise MacroTrailingCommaError(
                    macro_name=name,
                    parameter=param,
                    at=state.current_location(),
                )
            if param.endswith(MACRO_PARAMETERS_SEPARATOR):
                raise MacroDoubleCommaError(
                    macro_name=name,
                    parameter=param.removesuffix(MACRO_PARAMETERS_SEPARATOR),
                    at=state.current_location(),
                )
        elif not is_last:
            raise MacroMissingCommaError(
                macro_name=name,
                parameter=param,
                at=state.current_location(),
            )

        params.append(param)

    return tuple(params)


def _expect_directive_argument(
    tokens: Sequence[str],
    expected: str,
    state: ParserState,
) -> str:
    """Get second word of an directive line, which is its required argument."""
    if len(tokens) < 2:  # noqa: PLR2004
        raise MissingDirectiveArgumentError(
            directive=tokens[0],
            expected=expected,
            at=state.current_location(),
        )
    return tokens[1]
