from dataclasses import dataclass, field

DEFAULT_OUTPUT_EXTENSION = ".vsm"


@dataclass
class PreprocessorConfig:
    """Configuration for preprocessing pipeline and its output."""

    # Wrap output with standard VCL prologue/epilogue (`--enter`/`--exit` sections)
    add_boilerplate: bool = field(default=False)

    # Extension used when output path is inferred from input path
    output_extension: str = field(default=DEFAULT_OUTPUT_EXTENSION)

    # Definitions propagated from the CLI (e.g `-DNAME=VALUE`)
    # they are looked up before any file definitions
    cli_definitions: dict[str, str] = field(default_factory=dict[str, str])
