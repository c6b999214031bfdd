"""Core layer: command contract, parsing grammar and domain models.

Rules
-----
* No ``print()`` calls and no stream I/O.
* No imports from ``cli`` or ``infra`` at runtime.
* Parsing functions must be pure and deterministic.
"""

from clip_cli.core.command import Command, ContainerAware, derive_command_name
from clip_cli.core.models import ParsedInvocation
from clip_cli.core.parsing import parse_argv, parse_option
from clip_cli.core.protocols import Container, ContainerReceiver

__all__: list[str] = [
    "Command",
    "Container",
    "ContainerAware",
    "ContainerReceiver",
    "ParsedInvocation",
    "derive_command_name",
    "parse_argv",
    "parse_option",
]
