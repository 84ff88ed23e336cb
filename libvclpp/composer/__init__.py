"""Composition of preprocessed lines into final output file."""

from .composer import VCL_EPILOGUE, VCL_PROLOGUE, compose_output_lines, strip_comment
from .writer import render_output_text, write_output_file

__all__ = [
    "VCL_EPILOGUE",
    "VCL_PROLOGUE",
    "compose_output_lines",
    "render_output_text",
    "strip_comment",
    "write_output_file",
]
