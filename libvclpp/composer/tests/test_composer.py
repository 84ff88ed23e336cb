from libvclpp.composer import (
    VCL_EPILOGUE,
    VCL_PROLOGUE,
    compose_output_lines,
    strip_comment,
)


def test_strip_comment() -> None:
    assert strip_comment("CODE ; trailing note") == "CODE "
    assert strip_comment("; only comment") == ""
    assert strip_comment("A ; first ; second") == "A "


def test_strip_comment_without_comment() -> None:
    assert strip_comment("ADD vf01, vf02, vf03") == "ADD vf01, vf02, vf03"


def test_compose_drops_blank_lines() -> None:
    lines = compose_output_lines(["", "NOP", "   ", "  ; comment", "ADD ; note"])
    assert lines == ["NOP", "ADD "]


def test_compose_keeps_indentation() -> None:
    assert compose_output_lines(["", "  ADD 7, 7"]) == ["  ADD 7, 7"]


def test_compose_boilerplate() -> None:
    lines = compose_output_lines(["NOP"], add_boilerplate=True)
    assert lines == [*VCL_PROLOGUE, "NOP", *VCL_EPILOGUE]
    assert lines[:9] == [
        "",
        ".init_vf_all",
        ".init_vi_all",
        ".syntax new",
        ".vu",
        "",
        "--enter",
        "--endenter",
        "",
    ]
    assert lines[-4:] == ["", "--exit", "--endexit", ""]


def test_compose_boilerplate_without_lines() -> None:
    assert compose_output_lines([], add_boilerplate=True) == [*VCL_PROLOGUE, *VCL_EPILOGUE]
