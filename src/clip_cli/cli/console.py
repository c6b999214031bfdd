"""Console application: command registry and dispatch.

This module is the **sole error boundary** between command code and the
process.  :meth:`Console.run` parses the command line, finds the command
by name and executes it, translating the outcome into an exit code:

* no command given: the listing is shown, ``SUCCESS``;
* unknown command: an error plus the listing, ``GENERAL_ERROR``;
* the command raised: ``Error: <message>``, ``GENERAL_ERROR``;
* otherwise the command's own return value, uninterpreted.

Registry entries are resolved lazily.  Command instances are used as
they are; classes, factories and import strings are instantiated again
every time the registry is searched or listed, and the first command
whose name matches wins.
"""

from __future__ import annotations

import functools
import importlib
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import IO, Any, Union

from clip_cli.cli import exit_codes
from clip_cli.cli.stdio import Stdio
from clip_cli.core.command import Command
from clip_cli.core.protocols import Container, ContainerReceiver
from clip_cli.exceptions import CommandNotFoundError, InvalidCommandError

logger = logging.getLogger(__name__)

CommandReference = Union[Command, Callable[[], Any], str]
"""A command instance, a class or factory building one, or an import path."""


class Console:
    """Registry of commands and the loop that runs one of them.

    Parameters
    ----------
    commands:
        Initial command references, registered in order.
    container:
        Optional service container injected into every resolved command
        that implements :class:`~clip_cli.core.protocols.ContainerReceiver`.
    stdout, stderr, stdin, colors:
        Forwarded to the :class:`Stdio` built for each :meth:`run`.
    """

    def __init__(
        self,
        commands: Iterable[CommandReference] = (),
        container: Container | None = None,
        *,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
        stdin: IO[str] | None = None,
        colors: bool | None = None,
    ) -> None:
        self._commands: list[CommandReference] = []
        self._container: Container | None = container
        self._stdout = stdout
        self._stderr = stderr
        self._stdin = stdin
        self._colors = colors

        for command in commands:
            self.command(command)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def command(self, command: CommandReference) -> Console:
        """Register *command* and return the console for chaining."""
        self._commands.append(command)
        logger.debug("Registered command reference %r", command)
        return self

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_command(self, command: CommandReference) -> Command:
        """Turn a registry entry into a ready-to-run command.

        Raises
        ------
        CommandNotFoundError
            If an import-path string does not name an importable object.
        InvalidCommandError
            If the reference is not callable or does not produce a
            :class:`Command`.
        """
        if isinstance(command, Command):
            instance = command
        else:
            factory = _import_reference(command) if isinstance(command, str) else command
            label = _describe_reference(command)
            if not callable(factory):
                raise InvalidCommandError(
                    f"Command class '{label}' must extend Command.",
                )

            instance = factory()
            if not isinstance(instance, Command):
                raise InvalidCommandError(
                    f"Command class '{label}' must extend Command.",
                    hint="Subclass clip_cli.Command and implement execute().",
                )

        if self._container is not None and isinstance(instance, ContainerReceiver):
            instance.set_container(self._container)
            logger.debug("Injected container into %s", type(instance).__name__)

        return instance

    def get_command(self, name: str) -> Command | None:
        """Return the first registered command called *name*, if any."""
        for command in self._commands:
            instance = self.resolve_command(command)
            if instance.name() == name:
                return instance
        return None

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_commands(self, stdio: Stdio) -> None:
        """Write every registered command with its description."""
        if not self._commands:
            stdio.writeln("No commands available.")
            return

        stdio.writeln("Available commands:")
        stdio.writeln()
        for command in self._commands:
            instance = self.resolve_command(command)
            stdio.writeln(f"  {instance.name()}\t{instance.description()}")

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the command named on the command line.

        Parameters
        ----------
        argv:
            Raw arguments, program name first.  When ``None``,
            ``sys.argv`` is used.

        Returns
        -------
        int
            Process exit code.

        Raises
        ------
        CommandResolutionError
            If a registry entry cannot be resolved while searching.
        """
        stdio = Stdio(
            argv,
            self._stdout,
            self._stderr,
            self._stdin,
            colors=self._colors,
        )

        name = stdio.command
        if not name:
            self.list_commands(stdio)
            return exit_codes.SUCCESS

        command = self.get_command(name)
        if command is None:
            stdio.error(f"Command '{name}' not found.")
            stdio.writeln()
            self.list_commands(stdio)
            return exit_codes.GENERAL_ERROR

        logger.debug("Dispatching %r to %s", name, type(command).__name__)
        try:
            return command.execute(stdio)
        except KeyboardInterrupt:
            stdio.warning("Aborted by user.", to_stderr=True)
            return exit_codes.KEYBOARD_INTERRUPT
        except Exception as exc:  # noqa: BLE001
            logger.debug("Command %r failed", name, exc_info=True)
            stdio.error(f"Error: {exc}")
            return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Import-path references
# ---------------------------------------------------------------------------

def _import_reference(reference: str) -> Any:
    """Import the object named by ``"pkg.module:Name"`` or ``"pkg.module.Name"``."""
    module_name, sep, attribute = reference.partition(":")
    if not sep:
        module_name, _, attribute = reference.rpartition(".")

    if not module_name or not attribute:
        raise CommandNotFoundError(
            f"Command class '{reference}' not found.",
            hint="Use an import path such as 'package.module:ClassName'.",
        )

    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        # A missing dependency of the target module is re-raised.
        if exc.name is None or not (
            module_name == exc.name or module_name.startswith(exc.name + ".")
        ):
            raise
        raise CommandNotFoundError(
            f"Command class '{reference}' not found.",
        ) from exc

    try:
        target = functools.reduce(getattr, attribute.split("."), module)
    except AttributeError as exc:
        raise CommandNotFoundError(
            f"Command class '{reference}' not found.",
        ) from exc

    logger.debug("Imported command reference %r", reference)
    return target


def _describe_reference(reference: object) -> str:
    if isinstance(reference, str):
        return reference
    return getattr(reference, "__qualname__", None) or repr(reference)
