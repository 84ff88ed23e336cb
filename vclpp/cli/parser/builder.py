from argparse import ArgumentParser

from vclpp.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description=(
            "Applies custom preprocessing to a source file prior to running VCL. "
            "This preprocessor supports C-style #define constants and custom #macro directives."
        ),
        usage=f"{prog} <input-file> [output-file] [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_file",
        help="Input source file to preprocess",
        nargs="?",
        default=None,
    )
    parser.add_argument(
        "output_file",
        help="Output file path, by default input name with extension replaced by '.vsm'",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_output_group(parser)
    groups.add_preprocessor_group(parser)
    groups.add_debug_group(parser)
    return parser
