from __future__ import annotations

from typing import TYPE_CHECKING

from .directives import Definition, Directives
from .location import SourceLocation

if TYPE_CHECKING:
    from collections.abc import Mapping


def directives_from_raw_definitions(definitions: Mapping[str, str]) -> Directives:
    """Construct directive set of an definitions which does not come from any file (e.g CLI)."""
    location = SourceLocation.cli()
    return Directives(
        defines=tuple(
            Definition(name=name, value=value, location=location)
            for name, value in definitions.items()
        ),
    )
