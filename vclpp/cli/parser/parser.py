from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, cast

from libvclpp.config import PreprocessorConfig
from vclpp.cli.output import cli_fatal_abort
from vclpp.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace

DEFAULT_DEFINITION_VALUE = "1"


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    preprocessor = PreprocessorConfig(
        add_boilerplate=bool(args.add_boilerplate),
        cli_definitions=_process_definitions(args),
    )
    source_filepath = _process_source_filepath(args)
    output_filepath = _process_output_path(source_filepath, args, preprocessor)

    return CLIArguments(
        source_filepath=source_filepath,
        output_filepath=output_filepath,
        output_file_is_specified=args.output_file is not None,
        version=bool(args.version),
        verbose=bool(args.verbose),
        preprocessor=preprocessor,
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_source_filepath(args: Namespace) -> Path:
    """Process input source file as path and validate it."""
    if args.version:
        # Goal does not require any source
        return Path(args.source_file or "")

    source_file = cast("str | None", args.source_file)
    if source_file is None:
        return cli_fatal_abort("Expected source file to preprocess!")

    # Check for a flag in the wrong place/empty string...
    if not source_file or source_file.startswith("-"):
        return cli_fatal_abort(f'Invalid filename "{source_file}"!')

    return Path(source_file)


def _process_output_path(
    source_filepath: Path,
    args: Namespace,
    config: PreprocessorConfig,
) -> Path:
    """Process output file path, if it is not specified infer it from input source file path."""
    if args.output_file is not None:
        return Path(args.output_file)
    if not source_filepath.name:
        # Nothing to infer from (e.g version goal)
        return source_filepath
    return source_filepath.with_suffix(config.output_extension)


def _process_definitions(args: Namespace) -> dict[str, str]:
    """Process CLI propagated definitions as `NAME` or `NAME=VALUE` pairs."""
    user_definitions: dict[str, str] = {}

    raw_definitions = cast("list[str]", args.definitions)
    for cli_definition in raw_definitions:
        if "=" in cli_definition:
            name, value = cli_definition.split("=", maxsplit=1)
            user_definitions[name] = value

            continue
        user_definitions[cli_definition] = DEFAULT_DEFINITION_VALUE

    return user_definitions
