"""Errors within macro invocation (`NAME{ arg1, arg2 }`)."""

from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.directives import MacroBlock
from libvclpp.preprocessor.location import SourceLocation


class MacroTooManyArgumentsError(VclppError):
    def __init__(
        self,
        macro: MacroBlock,
        provided: int,
        line: str,
        at: SourceLocation | None = None,
    ) -> None:
        self.macro = macro
        self.provided = provided
        self.line = line
        self.at = at

    def __repr__(self) -> str:
        return f"""Macro '{self.macro.name}' takes no arguments, but {self.provided} were provided at {self.at}!

Invocation: '{self.line.strip()}'
Macro declared at {self.macro.location}

{self.generic_error_name}"""


class MacroArgumentCountMismatchError(VclppError):
    def __init__(
        self,
        macro: MacroBlock,
        provided: int,
        line: str,
        at: SourceLocation | None = None,
    ) -> None:
        self.macro = macro
        self.provided = provided
        self.line = line
        self.at = at

    @property
    def expected(self) -> int:
        return len(self.macro.params)

    def __repr__(self) -> str:
        return f"""Macro '{self.macro.name}' takes {self.expected} arguments, but {self.provided} were provided at {self.at}!

Invocation: '{self.line.strip()}'
Expected parameters: {", ".join(self.macro.params)}
Macro declared at {self.macro.location}

{self.generic_error_name}"""
