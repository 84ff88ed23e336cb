"""Errors collections that preprocessor may raise (user-facing ones)."""

from .directive_inside_macro_block import DirectiveInsideMacroBlockError
from .include_files_unavailable import IncludeFilesUnavailableError
from .macro_arguments import (
    MacroArgumentCountMismatchError,
    MacroTooManyArgumentsError,
)
from .macro_parameters import (
    MacroDoubleCommaError,
    MacroLostCommaError,
    MacroMissingCommaError,
    MacroTrailingCommaError,
    MacroUnexpectedDeclarationTextError,
)
from .malformed_include_path import MalformedIncludePathError
from .missing_directive_argument import MissingDirectiveArgumentError
from .recursive_include import RecursiveIncludeError
from .source_file_unavailable import SourceFileUnavailableError
from .unknown_directive import UnknownDirectiveError
from .unterminated_macro_block import UnterminatedMacroBlockError

__all__ = [
    "DirectiveInsideMacroBlockError",
    "IncludeFilesUnavailableError",
    "MacroArgumentCountMismatchError",
    "MacroDoubleCommaError",
    "MacroLostCommaError",
    "MacroMissingCommaError",
    "MacroTooManyArgumentsError",
    "MacroTrailingCommaError",
    "MacroUnexpectedDeclarationTextError",
    "MalformedIncludePathError",
    "MissingDirectiveArgumentError",
    "RecursiveIncludeError",
    "SourceFileUnavailableError",
    "UnknownDirectiveError",
    "UnterminatedMacroBlockError",
]
