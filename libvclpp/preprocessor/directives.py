from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from libvclpp.preprocessor.location import SourceLocation


@dataclass(frozen=True)
class Definition:
    """Single-line text substitution registered via `#define NAME value...`.

    Value is the remainder of the directive line re-joined with single spaces,
    it may be empty (then every standalone `NAME` is simply erased).
    """

    name: str
    value: str

    # Where that definition comes from, unused for expansion itself
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class MacroBlock:
    """Named, optionally parameterized, multi-line text template.

    Declared by `#macro NAME` or `#macro NAME: p1, p2, ...` and closed by `#endmacro`.
    Invocation is `NAME{ arg1, arg2 }` where `{` is glued to the name.

    Body lines are stored verbatim, empty body means macro expands into nothing.
    """

    name: str
    params: tuple[str, ...] = ()
    body: tuple[str, ...] = ()

    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Directives:
    """Set of directives found within single parsed file (or command-line)."""

    includes: tuple[str, ...] = ()
    defines: tuple[Definition, ...] = ()
    macros: tuple[MacroBlock, ...] = ()

    # Where each of `includes` is declared, parallel to it
    include_locations: tuple[SourceLocation, ...] = field(default=(), compare=False)

    @property
    def is_empty(self) -> bool:
        return not (self.includes or self.defines or self.macros)


@dataclass(frozen=True)
class ParsedSource:
    """Result of parsing single file: its directives plus residual code lines."""

    path: Path
    directives: Directives

    # Non-directive, non-blank and non-comment lines in order of appearance (and where each is found)
    code_lines: tuple[str, ...] = ()
    code_locations: tuple[SourceLocation, ...] = field(default=(), compare=False)

    # Advisory messages which does not stop preprocessing (e.g missing `#vuprog`)
    warnings: tuple[str, ...] = ()
