import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libvclpp.composer import VCL_EPILOGUE, VCL_PROLOGUE
from libvclpp.preprocessor.keywords import WORD_TO_DIRECTIVE_KEYWORD
from vclpp.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[VCL preprocessor toolchain]")
    print(f"\tDirectives: {', '.join(WORD_TO_DIRECTIVE_KEYWORD)}")
    print(f"\tDefault output extension: {args.preprocessor.output_extension}")
    print(f"\tBoilerplate: {len(VCL_PROLOGUE)} prologue / {len(VCL_EPILOGUE)} epilogue lines")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)
