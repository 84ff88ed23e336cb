from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libvclpp.composer import compose_output_lines, write_output_file
from libvclpp.preprocessor import preprocess_file
from vclpp.cli.output import cli_message

if TYPE_CHECKING:
    from vclpp.cli.parser.arguments import CLIArguments


def cli_perform_preprocess_goal(args: CLIArguments) -> NoReturn:
    """Perform preprocess goal that expands source file directives into output file."""
    config = args.preprocessor
    cli_message(
        "INFO",
        f"Preprocessing '{args.source_filepath}' into '{args.output_filepath}'...",
        verbose=args.verbose,
    )

    preprocessed = preprocess_file(
        args.source_filepath,
        cli_definitions=config.cli_definitions,
        on_warning=lambda text: cli_message("WARNING", text),
    )

    directives = preprocessed.directives
    cli_message(
        "INFO",
        f"Resolved {len(preprocessed.source.directives.includes)} include(s), "
        f"{sum(len(d.defines) for d in directives)} definition(s) "
        f"and {sum(len(d.macros) for d in directives)} macro(s).",
        verbose=args.verbose,
    )

    # Output is opened only after whole source is successfully preprocessed
    lines = compose_output_lines(
        preprocessed.lines,
        add_boilerplate=config.add_boilerplate,
    )
    write_output_file(args.output_filepath, lines)

    cli_message(
        "INFO",
        f"Written {len(lines)} line(s) into '{args.output_filepath}'.",
        verbose=args.verbose,
    )
    return sys.exit(0)
