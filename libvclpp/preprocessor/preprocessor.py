from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .defines import expand_defines
from .definitions import directives_from_raw_definitions
from .include import resolve_includes_of_source
from .macros import expand_macros
from .parser import parse_source_file

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from .directives import Directives, ParsedSource


@dataclass(frozen=True)
class PreprocessedSource:
    """Fully expanded source, ready to be composed into output."""

    source: ParsedSource

    # Merged lookup table: (CLI definitions), includes in order, root source last
    directives: tuple[Directives, ...]

    # Code lines after macro and define expansion (comments are not stripped yet)
    lines: tuple[str, ...]


def preprocess_file(
    path: Path,
    *,
    cli_definitions: Mapping[str, str] | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> PreprocessedSource:
    """Preprocess given root source file by resolving includes, macros and defines.

    Whole result is computed in memory, any error aborts preprocessing.
    """
    source = parse_source_file(path, is_include=False)
    if on_warning:
        for warning in source.warnings:
            on_warning(warning)

    directives = merge_directive_sets(
        source,
        resolve_includes_of_source(source),
        cli_definitions=cli_definitions,
    )

    lines = expand_macros(source.code_lines, directives, source.code_locations)
    lines = expand_defines(lines, directives)
    return PreprocessedSource(
        source=source,
        directives=directives,
        lines=tuple(lines),
    )


def merge_directive_sets(
    source: ParsedSource,
    included: list[Directives],
    *,
    cli_definitions: Mapping[str, str] | None = None,
) -> tuple[Directives, ...]:
    """Merge directive sets into lookup order, first match wins within expansion."""
    merged: list[Directives] = []
    if cli_definitions:
        merged.append(directives_from_raw_definitions(cli_definitions))
    merged.extend(included)
    merged.append(source.directives)
    return tuple(merged)
