from __future__ import annotations

from typing import TYPE_CHECKING

from .errors.source_file_unavailable import SourceFileUnavailableError

if TYPE_CHECKING:
    from pathlib import Path

SOURCE_FILE_ENCODING = "utf-8"


def read_source_file_lines(path: Path) -> list[str]:
    """Open source file, drain it line-by-line (without line terminators) and close it.

    Any failure to open or decode is raised as user-facing error.
    """
    try:
        with path.open(encoding=SOURCE_FILE_ENCODING) as file:
            return [line.rstrip("\n") for line in file]
    except (OSError, UnicodeDecodeError) as e:
        raise SourceFileUnavailableError(path=path, reason=str(e)) from e
