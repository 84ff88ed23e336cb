from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.location import SourceLocation


class DirectiveInsideMacroBlockError(VclppError):
    def __init__(self, line: str, macro_name: str, at: SourceLocation) -> None:
        self.line = line
        self.macro_name = macro_name
        self.at = at

    def __repr__(self) -> str:
        return f"""Preprocessor directive inside macro block '{self.macro_name}' at {self.at}: '{self.line}'

Macro bodies cannot contain directives.
Did you forgot to close previous macro with `#endmacro`?

{self.generic_error_name}"""
