"""Protocols (interfaces) consumed by the core layer.

These define the contracts external collaborators must satisfy.  They
are matched structurally: no explicit inheritance required.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class Container(Protocol):
    """Contract for service containers handed to a :class:`Console`.

    Any object exposing ``get`` and ``has`` with these signatures will do,
    whatever library it comes from.
    """

    def get(self, id: str) -> Any:
        """Return the service registered under *id*.

        Implementations raise their own exception types when *id* is
        unknown or the service cannot be built; those errors reach the
        calling command unchanged.
        """
        ...  # pragma: no cover

    def has(self, id: str) -> bool:
        """Return whether *id* can be resolved.  Must never raise."""
        ...  # pragma: no cover


@runtime_checkable
class ContainerReceiver(Protocol):
    """Optional capability of a command: accepting a container.

    The console checks resolved commands against this protocol and only
    injects its container into those that conform.
    """

    def set_container(self, container: Container) -> Any:
        """Store *container* for later ``get``/``has`` lookups."""
        ...  # pragma: no cover
