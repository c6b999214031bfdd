"""Domain models for clip-cli.

Models are frozen dataclasses: immutable value objects with no I/O and
no dependencies beyond the standard library.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _empty_options() -> Mapping[str, str | bool]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ParsedInvocation:
    """The command line split into command, arguments and options."""

    command: str = ""
    """First token after the program name, or ``""`` when there is none."""

    arguments: tuple[str, ...] = ()
    """Positional tokens in the order they were given."""

    options: Mapping[str, str | bool] = field(default_factory=_empty_options)
    """``--key=value`` pairs and ``--flag`` booleans, last writer wins."""
