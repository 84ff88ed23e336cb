from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.location import SourceLocation


class MalformedIncludePathError(VclppError):
    def __init__(self, path: str, at: SourceLocation) -> None:
        self.path = path
        self.at = at

    def __repr__(self) -> str:
        return f"""Malformed include path {self.path} at {self.at}!

Include directive must be between double quotes and contain no spaces,
e.g `#include "path/to/file.vcl"`

{self.generic_error_name}"""
