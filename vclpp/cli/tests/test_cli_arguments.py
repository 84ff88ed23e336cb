from pathlib import Path

import pytest

from vclpp.cli.parser.arguments import CLIArguments
from vclpp.cli.parser.builder import build_cli_parser
from vclpp.cli.parser.parser import parse_cli_arguments


def test_arguments_default_output_path() -> None:
    args = _parse("shaders/program.vcl")
    assert args.source_filepath == Path("shaders/program.vcl")
    assert args.output_filepath == Path("shaders/program.vsm")
    assert not args.output_file_is_specified
    assert not args.preprocessor.add_boilerplate


def test_arguments_default_output_path_replaces_last_extension() -> None:
    assert _parse("program.pp.vcl").output_filepath == Path("program.pp.vsm")


def test_arguments_default_output_path_without_extension() -> None:
    assert _parse("program").output_filepath == Path("program.vsm")


def test_arguments_explicit_output_path() -> None:
    args = _parse("program.vcl", "out/program.s")
    assert args.output_filepath == Path("out/program.s")
    assert args.output_file_is_specified


@pytest.mark.parametrize("flag", ["-j", "--vcljunk"])
def test_arguments_boilerplate_in_second_slot(flag: str) -> None:
    args = _parse("program.vcl", flag)
    assert args.preprocessor.add_boilerplate
    assert args.output_filepath == Path("program.vsm")


@pytest.mark.parametrize("flag", ["-j", "--vcljunk"])
def test_arguments_boilerplate_in_third_slot(flag: str) -> None:
    args = _parse("program.vcl", "program.s", flag)
    assert args.preprocessor.add_boilerplate
    assert args.output_filepath == Path("program.s")


def test_arguments_definitions() -> None:
    args = _parse("program.vcl", "-D", "WIDTH=8", "-DDEBUG", "--define", "EXPR=a=b")
    assert args.preprocessor.cli_definitions == {
        "WIDTH": "8",
        "DEBUG": "1",
        "EXPR": "a=b",
    }


def test_arguments_verbose_and_debug_errors() -> None:
    args = _parse("program.vcl", "-v", "--debug-errors")
    assert args.verbose
    assert not args.cli_debug_user_friendly_errors
    assert _parse("program.vcl").cli_debug_user_friendly_errors


def test_arguments_invalid_filename() -> None:
    with pytest.raises(SystemExit) as e:
        _parse("-")
    assert e.value.code == 1


def test_arguments_version_does_not_require_source() -> None:
    assert _parse("--version").version


def _parse(*argv: str) -> CLIArguments:
    parser = build_cli_parser("vclpp")
    return parse_cli_arguments(parser.parse_intermixed_args(argv))
