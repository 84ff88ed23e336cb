from enum import Enum, auto


class DirectiveKeyword(Enum):
    """Preprocessor directives, always first whitespace-separated word of a line."""

    INCLUDE = auto()
    DEFINE = auto()

    MACRO = auto()
    END_MACRO = auto()

    # Advisory program markers, used only for warnings on root file
    PROGRAM_START = auto()
    PROGRAM_END = auto()


WORD_TO_DIRECTIVE_KEYWORD = {
    "#include": DirectiveKeyword.INCLUDE,
    "#define": DirectiveKeyword.DEFINE,
    "#macro": DirectiveKeyword.MACRO,
    "#endmacro": DirectiveKeyword.END_MACRO,
    "#vuprog": DirectiveKeyword.PROGRAM_START,
    "#endvuprog": DirectiveKeyword.PROGRAM_END,
}

DIRECTIVE_MARK = "#"
SINGLE_LINE_COMMENT = ";"

MACRO_INVOCATION_MARK = "{"
MACRO_PARAMETERS_MARK = ":"
MACRO_PARAMETERS_SEPARATOR = ","

INCLUDE_PATH_QUOTE = '"'
