from .expander import (
    bind_macro_arguments,
    expand_macro_invocation,
    expand_macros,
    find_macro_invocation,
)

__all__ = [
    "bind_macro_arguments",
    "expand_macro_invocation",
    "expand_macros",
    "find_macro_invocation",
]
