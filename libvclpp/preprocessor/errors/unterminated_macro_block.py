from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.location import SourceLocation


class UnterminatedMacroBlockError(VclppError):
    def __init__(self, macro_name: str, opened_at: SourceLocation) -> None:
        self.macro_name = macro_name
        self.opened_at = opened_at

    def __repr__(self) -> str:
        return f"""End of file reached while parsing a macro directive!

Last macro seen '{self.macro_name}' opened at {self.opened_at}.
Did you forgot to close it with `#endmacro`?

{self.generic_error_name}"""
