"""Errors within macro declaration header (`#macro NAME: p1, p2`)."""

from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.location import SourceLocation


class MacroLostCommaError(VclppError):
    def __init__(self, macro_name: str, at: SourceLocation) -> None:
        self.macro_name = macro_name
        self.at = at

    def __repr__(self) -> str:
        return f"""Lost comma in macro '{self.macro_name}' parameter list at {self.at}!

Parameters are separated with comma glued to parameter name, e.g `#macro NAME: a, b`

{self.generic_error_name}"""


class MacroDoubleCommaError(VclppError):
    def __init__(self, macro_name: str, parameter: str, at: SourceLocation) -> None:
        self.macro_name = macro_name
        self.parameter = parameter
        self.at = at

    def __repr__(self) -> str:
        return f"""Lost comma after macro parameter '{self.parameter}' of macro '{self.macro_name}' at {self.at}!

Probably left from editing out a parameter?

{self.generic_error_name}"""


class MacroMissingCommaError(VclppError):
    def __init__(self, macro_name: str, parameter: str, at: SourceLocation) -> None:
        self.macro_name = macro_name
        self.parameter = parameter
        self.at = at

    def __repr__(self) -> str:
        return f"""Missing comma after macro parameter '{self.parameter}' of macro '{self.macro_name}' at {self.at}!

{self.generic_error_name}"""


class MacroTrailingCommaError(VclppError):
    def __init__(self, macro_name: str, parameter: str, at: SourceLocation) -> None:
        self.macro_name = macro_name
        self.parameter = parameter
        self.at = at

    def __repr__(self) -> str:
        return f"""Extraneous comma after last macro parameter '{self.parameter}' of macro '{self.macro_name}' at {self.at}!

{self.generic_error_name}"""


class MacroUnexpectedDeclarationTextError(VclppError):
    def __init__(self, macro_name: str, text: str, at: SourceLocation) -> None:
        self.macro_name = macro_name
        self.text = text
        self.at = at

    def __repr__(self) -> str:
        return f"""More text follows macro '{self.macro_name}' declaration at {self.at}: '{self.text}'

Add a ':' right after the macro name to define a param list!
(e.g `#macro {self.macro_name}: {self.text}`)

{self.generic_error_name}"""
