import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libvclpp.exceptions import VclppError
from vclpp.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_vclpp_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit preprocessor errors."""
    try:
        yield
    except VclppError as ve:
        if debug_user_friendly_errors:
            cli_message("ERROR", repr(ve))
            return cli_fatal_abort("Terminating due to previous error(s)...")
        raise  # re-throw exception due to unfriendly flag set for debugging
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
