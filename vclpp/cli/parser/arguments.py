from dataclasses import dataclass
from pathlib import Path

from libvclpp.config import PreprocessorConfig


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole preprocessor process."""

    source_filepath: Path
    output_filepath: Path
    output_file_is_specified: bool

    version: bool
    verbose: bool

    preprocessor: PreprocessorConfig

    cli_debug_user_friendly_errors: bool
