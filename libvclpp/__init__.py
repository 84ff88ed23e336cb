"""Library for preprocessing vector unit assembly sources prior to running VCL.

Provides parsing of preprocessor directives, macro and define expansion and output composition.
"""

from .composer import compose_output_lines, write_output_file
from .config import PreprocessorConfig
from .preprocessor import preprocess_file

__all__ = [
    "PreprocessorConfig",
    "compose_output_lines",
    "preprocess_file",
    "write_output_file",
]
