from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from .directives import Definition, Directives, MacroBlock, ParsedSource
from .location import SourceLocation

if TYPE_CHECKING:
    from pathlib import Path


class ParserMode(Enum):
    """Line classifier states, directive parser is an two-state machine."""

    NORMAL = auto()
    INSIDE_MACRO_BLOCK = auto()


@dataclass(frozen=False)
class ParserState:
    """State for directive parsing which only required for internal usages.

    Accumulates everything found in single file and is folded into immutable `ParsedSource` at the end.
    """

    path: Path
    is_include: bool

    mode: ParserMode = ParserMode.NORMAL
    row: int = 0

    includes: list[str] = field(default_factory=list[str])
    include_locations: list[SourceLocation] = field(default_factory=list[SourceLocation])
    defines: list[Definition] = field(default_factory=list[Definition])
    macros: list[MacroBlock] = field(default_factory=list[MacroBlock])
    code_lines: list[str] = field(default_factory=list[str])
    code_locations: list[SourceLocation] = field(default_factory=list[SourceLocation])

    # Macro which is being accumulated while inside macro block
    macro_header: MacroBlock | None = None
    macro_body: list[str] = field(default_factory=list[str])

    found_program_start: bool = False
    found_program_end: bool = False

    def current_location(self) -> SourceLocation:
        return SourceLocation(filepath=self.path, line_number=self.row)

    def open_macro_block(self, header: MacroBlock) -> None:
        assert self.mode == ParserMode.NORMAL
        self.mode = ParserMode.INSIDE_MACRO_BLOCK
        self.macro_header = header
        self.macro_body = []

    def close_macro_block(self) -> MacroBlock:
        assert self.mode == ParserMode.INSIDE_MACRO_BLOCK
        assert self.macro_header is not None
        macro = MacroBlock(
            name=self.macro_header.name,
            params=self.macro_header.params,
            body=tuple(self.macro_body),
            location=self.macro_header.location,
        )
        self.macros.append(macro)

        self.mode = ParserMode.NORMAL
        self.macro_header = None
        self.macro_body = []
        return macro

    def into_parsed_source(self) -> ParsedSource:
        assert self.mode == ParserMode.NORMAL
        directives = Directives(
            includes=tuple(self.includes),
            include_locations=tuple(self.include_locations),
            defines=tuple(self.defines),
            macros=tuple(self.macros),
        )
        return ParsedSource(
            path=self.path,
            directives=directives,
            code_lines=tuple(self.code_lines),
            code_locations=tuple(self.code_locations),
            warnings=tuple(self._collect_program_markers_warnings()),
        )

    def _collect_program_markers_warnings(self) -> list[str]:
        # Included files never require program markers
        if self.is_include:
            return []
        warnings: list[str] = []
        if not self.found_program_start:
            warnings.append(
                f"Program start directive '#vuprog' was not found in '{self.path}'!",
            )
        if not self.found_program_end:
            warnings.append(
                f"Program end directive '#endvuprog' was not found in '{self.path}'!",
            )
        return warnings
