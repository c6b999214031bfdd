"""clip-cli: a minimal command-line application toolkit.

Parses process arguments into a command name, positional arguments and
``--options``, dispatches to a registered :class:`Command` by name, and
provides colored output and interactive prompts through :class:`Stdio`.
"""

import logging

from clip_cli.cli.console import Console
from clip_cli.cli.stdio import Stdio
from clip_cli.core.command import Command, ContainerAware
from clip_cli.core.protocols import Container, ContainerReceiver
from clip_cli.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "Command",
    "Console",
    "Container",
    "ContainerAware",
    "ContainerReceiver",
    "Stdio",
    "__version__",
]
