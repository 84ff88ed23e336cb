from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from vclpp.cli.errors.error_handler import cli_vclpp_error_handler
from vclpp.cli.goals import perform_desired_toolchain_goal
from vclpp.cli.parser.builder import build_cli_parser
from vclpp.cli.parser.parser import parse_cli_arguments

from .executable import cli_get_executable_program, warn_on_improper_installation
from .output import cli_message

if TYPE_CHECKING:
    from collections.abc import Sequence


def cli_entry_point(
    argv: Sequence[str] | None = None,
    *,
    prog: str | None = None,
) -> None:
    """CLI main entry."""
    prog = cli_get_executable_program(override=prog)
    warn_on_improper_installation(prog)

    effective_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = build_cli_parser(prog)
    if not effective_argv:
        parser.print_help()
        sys.exit(1)

    namespace, unknown_args = parser.parse_known_intermixed_args(effective_argv)
    if unknown_args:
        cli_message("WARNING", f"Ignoring unknown option(s): {' '.join(unknown_args)}")

    args = parse_cli_arguments(namespace)
    wrapper = cli_vclpp_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    )

    with wrapper:
        # Wrap goal into error handler as in unwraps errors into user-friendly ones (except internal ones as bugs)
        perform_desired_toolchain_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in a CLI: toolchain must perform at least one goal!")
    sys.exit(1)


if __name__ == "__main__":
    cli_entry_point()
