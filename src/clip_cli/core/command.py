"""Command base class and the opt-in container mixin.

A command is a named, independently executable unit.  Subclasses
implement :meth:`Command.execute`; the name defaults to the kebab-cased
class name and the description to an empty string.

Commands that need services mix in :class:`ContainerAware`::

    class Migrate(ContainerAware, Command):
        def execute(self, stdio: Stdio) -> int:
            db = self.get("db")
            ...
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from clip_cli.core.protocols import Container
from clip_cli.exceptions import ContainerNotAvailableError

if TYPE_CHECKING:
    from clip_cli.cli.stdio import Stdio

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def derive_command_name(class_name: str) -> str:
    """Convert a PascalCase class name to a kebab-case command name.

    ``MigrateDB`` becomes ``migrate-db`` and ``HelloWorld`` becomes
    ``hello-world``.  Runs of capitals are kept together.
    """
    return _CAMEL_BOUNDARY.sub(r"\1-\2", class_name).lower()


class Command(ABC):
    """Abstract base class for console commands."""

    def name(self) -> str:
        """Return the name the command is invoked by."""
        return derive_command_name(type(self).__name__)

    def description(self) -> str:
        """Return the one-line description shown in command listings."""
        return ""

    @abstractmethod
    def execute(self, stdio: Stdio) -> int:
        """Run the command and return its process exit code.

        Parameters
        ----------
        stdio:
            Parsed arguments and options plus the output/input streams.

        Returns
        -------
        int
            ``0`` on success; any other value is passed through to the
            caller of :meth:`Console.run` unchanged.
        """


class ContainerAware:
    """Mixin giving a command access to an injected service container."""

    _container: Container | None = None

    def set_container(self, container: Container) -> ContainerAware:
        """Store *container* and return ``self`` for chaining."""
        self._container = container
        return self

    def get(self, id: str) -> Any:
        """Fetch service *id* from the container.

        Raises
        ------
        ContainerNotAvailableError
            If no container has been set.  Errors raised by the container
            itself propagate unchanged.
        """
        if self._container is None:
            raise ContainerNotAvailableError(
                "Container is not available. Pass a container to the Console constructor.",
                hint="Console(commands, container=...) injects it into ContainerAware commands.",
            )
        return self._container.get(id)

    def has(self, id: str) -> bool:
        """Return whether the container can provide *id*; ``False`` without one."""
        if self._container is None:
            return False
        return self._container.has(id)
