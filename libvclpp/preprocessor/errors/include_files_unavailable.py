from collections.abc import Sequence
from pathlib import Path

from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.location import SourceLocation

from .source_file_unavailable import SourceFileUnavailableError


class IncludeFilesUnavailableError(VclppError):
    def __init__(
        self,
        includer: Path,
        failures: Sequence[SourceFileUnavailableError],
        included_at: Sequence[SourceLocation | None],
    ) -> None:
        self.includer = includer
        self.failures = failures
        # Location of `#include` directive of each failure, parallel to it
        self.included_at = included_at

    @property
    def failed_paths(self) -> list[Path]:
        return [failure.path for failure in self.failures]

    def __repr__(self) -> str:
        listing = "\n".join(
            f"\t'{failure.path}' included at {at}: {failure.reason}"
            for failure, at in zip(self.failures, self.included_at, strict=True)
        )
        return f"""Failed to open {len(self.failures)} include file(s) of '{self.includer}':
{listing}

Include paths are resolved relative to current working directory.

{self.generic_error_name}"""
