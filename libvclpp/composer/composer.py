from __future__ import annotations

from typing import TYPE_CHECKING

from libvclpp.preprocessor.keywords import SINGLE_LINE_COMMENT

if TYPE_CHECKING:
    from collections.abc import Iterable

# Standard program framing expected by VCL
VCL_PROLOGUE = (
    "",
    ".init_vf_all",
    ".init_vi_all",
    ".syntax new",
    ".vu",
    "",
    "--enter",
    "--endenter",
    "",
)
VCL_EPILOGUE = (
    "",
    "--exit",
    "--endexit",
    "",
)


def compose_output_lines(
    lines: Iterable[str],
    *,
    add_boilerplate: bool = False,
) -> list[str]:
    """Strip comments from expanded lines, drop blank ones and optionally wrap into VCL boilerplate."""
    composed = [line for line in map(strip_comment, lines) if line.strip()]
    if not add_boilerplate:
        return composed
    return [*VCL_PROLOGUE, *composed, *VCL_EPILOGUE]


def strip_comment(line: str) -> str:
    """Truncate line at first comment mark (`;`), mark itself is dropped too."""
    pos = line.find(SINGLE_LINE_COMMENT)
    if pos == -1:
        return line
    return line[:pos]
