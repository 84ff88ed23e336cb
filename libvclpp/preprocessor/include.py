from __future__ import annotations

from itertools import zip_longest
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import (
    IncludeFilesUnavailableError,
    RecursiveIncludeError,
    SourceFileUnavailableError,
)
from .io import read_source_file_lines
from .parser import parse_source_lines

if TYPE_CHECKING:
    from .directives import Directives, ParsedSource
    from .location import SourceLocation


def resolve_includes_of_source(root: ParsedSource) -> list[Directives]:
    """Read and parse every file included by root source, in order of appearance.

    All includes are opened first and every failure is collected before aborting,
    so user sees all missing files at once.
    Included files contribute only their directives (never code lines)
    and may not include other files themselves.
    """
    included_lines: list[tuple[Path, SourceLocation | None, list[str]]] = []
    failures: list[SourceFileUnavailableError] = []
    failures_at: list[SourceLocation | None] = []

    includes = zip_longest(
        root.directives.includes,
        root.directives.include_locations,
    )
    for include, at in includes:
        path = Path(include)
        try:
            included_lines.append((path, at, read_source_file_lines(path)))
        except SourceFileUnavailableError as e:
            failures.append(e)
            failures_at.append(at)

    if failures:
        raise IncludeFilesUnavailableError(
            includer=root.path,
            failures=failures,
            included_at=failures_at,
        )

    resolved: list[Directives] = []
    for path, at, lines in included_lines:
        included = parse_source_lines(path, lines, is_include=True)
        if included.directives.includes:
            raise RecursiveIncludeError(
                path=path,
                nested_includes=included.directives.includes,
                at=included.directives.include_locations[0],
                included_at=at,
            )
        resolved.append(included.directives)
    return resolved
