from pathlib import Path

from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.location import SourceLocation


class RecursiveIncludeError(VclppError):
    def __init__(
        self,
        path: Path,
        nested_includes: tuple[str, ...],
        at: SourceLocation | None = None,
        included_at: SourceLocation | None = None,
    ) -> None:
        self.path = path
        self.nested_includes = nested_includes
        # First nested `#include` within included file
        self.at = at
        # `#include` of that file within root source
        self.included_at = included_at

    def __repr__(self) -> str:
        return f"""Include directives are not allowed inside included file '{self.path}' (included at {self.included_at})!

Found nested include(s) at {self.at}: {", ".join(self.nested_includes)}
Recursive includes are not supported, please include these files from the root source.

{self.generic_error_name}"""
