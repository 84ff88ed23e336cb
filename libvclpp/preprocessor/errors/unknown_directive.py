from libvclpp.exceptions import VclppError
from libvclpp.preprocessor.location import SourceLocation


class UnknownDirectiveError(VclppError):
    def __init__(self, directive: str, at: SourceLocation) -> None:
        self.directive = directive
        self.at = at

    def __repr__(self) -> str:
        return f"""Unknown preprocessor directive '{self.directive}' at {self.at}!

Known directives: #include, #define, #macro, #endmacro, #vuprog, #endvuprog

{self.generic_error_name}"""
