from pathlib import Path

from libvclpp.exceptions import VclppError


class OutputFileUnwritableError(VclppError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to open file '{self.path}' for writing!

{self.reason}

{self.generic_error_name}"""
