"""Preprocessor of `#include`, `#define` and `#macro` directives."""

from .directives import Definition, Directives, MacroBlock, ParsedSource
from .parser import parse_source_file, parse_source_lines
from .preprocessor import PreprocessedSource, preprocess_file

__all__ = [
    "Definition",
    "Directives",
    "MacroBlock",
    "ParsedSource",
    "PreprocessedSource",
    "parse_source_file",
    "parse_source_lines",
    "preprocess_file",
]
