from .expander import expand_defines, substitute_standalone_name

__all__ = ["expand_defines", "substitute_standalone_name"]
