import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit an message to the user, errors and warnings are emitted into stderr.

    INFO messages are displayed only when verbose.
    """
    if level == "INFO" and not verbose:
        return
    stream = sys.stdout if level == "INFO" else sys.stderr
    print(f"[{level}] {text}", file=stream)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error and abort whole process with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
