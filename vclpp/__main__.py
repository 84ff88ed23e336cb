"""Entry point for CLI.

Only for calling via `python -m vclpp`, prefer installed `vclpp` executable.
"""

from vclpp.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
