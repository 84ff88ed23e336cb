from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import OutputFileUnwritableError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

OUTPUT_FILE_ENCODING = "utf-8"


def render_output_text(lines: Sequence[str]) -> str:
    """Render composed lines as file text, each line is terminated with newline."""
    return "".join(f"{line}\n" for line in lines)


def write_output_file(path: Path, lines: Sequence[str]) -> None:
    """Write composed lines into output file at once."""
    text = render_output_text(lines)
    try:
        with path.open("w", encoding=OUTPUT_FILE_ENCODING, newline="\n") as file:
            file.write(text)
    except OSError as e:
        raise OutputFileUnwritableError(path=path, reason=str(e)) from e
