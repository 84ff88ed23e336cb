from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.location import SourceLocation


class MissingDirectiveArgumentError(VclppError):
    def __init__(self, directive: str, expected: str, at: SourceLocation) -> None:
        self.directive = directive
        self.expected = expected
        self.at = at

    def __repr__(self) -> str:
        return f"""Directive '{self.directive}' at {self.at} is missing its {self.expected}!

Do you have unfinished directive?

{self.generic_error_name}"""
