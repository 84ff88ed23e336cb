from __future__ import annotations

from typing import TYPE_CHECKING

from libvclpp.preprocessor.boundaries import is_standalone_identifier

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from libvclpp.preprocessor.directives import Directives


def expand_defines(
    lines: Iterable[str],
    directives: Sequence[Directives],
) -> list[str]:
    """Substitute every known definition within each line.

    Each line is tested against every definition of every directive set in order,
    so substitutions compound left-to-right, set-by-set (first set wins on name clash).
    """
    expanded: list[str] = []
    for line in lines:
        for directive_set in directives:
            for definition in directive_set.defines:
                line = substitute_standalone_name(line, definition.name, definition.value)
        expanded.append(line)
    return expanded


def substitute_standalone_name(line: str, name: str, value: str) -> str:
    """Replace every standalone occurrence of `name` with `value`.

    Search is resumed right after inserted value, so text just inserted is never re-scanned.
    """
    if not name:
        return line

    cursor = 0
    while (pos := line.find(name, cursor)) != -1:
        if not is_standalone_identifier(line, pos, len(name)):
            cursor = pos + len(name)
            continue
        line = line[:pos] + value + line[pos + len(name) :]
        cursor = pos + len(value)
    return line
