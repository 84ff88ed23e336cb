from argparse import ArgumentParser


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Control preprocessor output")
    group.add_argument(
        "--vcljunk",
        "-j",
        dest="add_boilerplate",
        default=False,
        action="store_true",
        help="Adds the standard VCL prologue/epilogue junk to the output.",
    )


def add_preprocessor_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with preprocessor options into given parser."""
    group = parser.add_argument_group(
        title="Preprocessor",
        description="Flags for the preprocessor.",
    )
    group.add_argument(
        "--define",
        "-D",
        required=False,
        help="Define a constant (default value is '1') looked up before any file definitions",
        action="append",
        dest="definitions",
        default=[],
    )


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Debugging and diagnostics")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from preprocessor.",
    )

    group.add_argument(
        "--debug-errors",
        required=False,
        action="store_false",
        dest="cli_debug_user_friendly_errors",
        default=True,
        help="If passed, errors are raised as-is with traceback instead of user-friendly diagnostics.",
    )
