from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of a line within a source file (or a non-file origin)."""

    # 1-based, as preprocessor works line-by-line there is no column
    line_number: int

    filepath: Path | None = None
    source: Literal["file", "cli"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "cli":
            return "'(command-line-interface)'"
        assert self.filepath is not None
        return f"'{self.filepath}:{self.line_number}'"

    @classmethod
    def cli(cls) -> SourceLocation:
        """Create a location for command-line originated definitions."""
        return cls(line_number=0, source="cli")
