"""Custom exception hierarchy for clip-cli.

Every error the toolkit raises on its own behalf inherits from
:class:`ClipError`.  Faults raised by command code are *not* wrapped:
the console's dispatch boundary reports them as they are.

Hierarchy
---------
ClipError
├── CommandResolutionError
│   ├── CommandNotFoundError
│   └── InvalidCommandError
└── ContainerNotAvailableError
"""

from __future__ import annotations


class ClipError(Exception):
    """Base exception for all clip-cli errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for the developer wiring commands."""


# --- Command resolution ----------------------------------------------------

class CommandResolutionError(ClipError):
    """Raised when a registered command reference cannot become a command."""


class CommandNotFoundError(CommandResolutionError):
    """Raised when a command identifier does not name an importable object."""


class InvalidCommandError(CommandResolutionError):
    """Raised when a reference resolves to something that is not a Command."""


# --- Container access ------------------------------------------------------

class ContainerNotAvailableError(ClipError):
    """Raised when a command asks for a service before a container was set."""
