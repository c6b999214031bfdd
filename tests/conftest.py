"""Shared pytest fixtures and configuration for the clip-cli test suite.

Guidelines
----------
* No real terminal: every stream is an in-memory ``io.StringIO``.
* Color output is forced on or off explicitly, never detected from the
  host, unless the test is about detection itself.
* ``NO_COLOR`` is cleared for every test so host settings cannot leak in.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

import pytest

from clip_cli.cli.stdio import Stdio


class Streams:
    """Bundle of in-memory stdout/stderr/stdin for one test."""

    def __init__(self, stdin_text: str = "") -> None:
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.stdin = io.StringIO(stdin_text)

    def feed(self, text: str) -> None:
        """Replace pending input with *text*."""
        self.stdin = io.StringIO(text)

    @property
    def out(self) -> str:
        return self.stdout.getvalue()

    @property
    def err(self) -> str:
        return self.stderr.getvalue()


class DictContainer:
    """Minimal service container satisfying the ``Container`` protocol."""

    def __init__(self, services: dict[str, Any] | None = None) -> None:
        self._services: dict[str, Any] = dict(services or {})

    def get(self, id: str) -> Any:
        if id not in self._services:
            raise KeyError(f"Service '{id}' not found.")
        return self._services[id]

    def has(self, id: str) -> bool:
        return id in self._services


@pytest.fixture(autouse=True)
def _clear_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def streams() -> Streams:
    return Streams()


@pytest.fixture
def make_stdio(streams: Streams) -> Callable[..., Stdio]:
    """Build a :class:`Stdio` wired to the ``streams`` fixture.

    ``input`` seeds stdin; colors default to off.
    """

    def _make(
        argv: list[str] | None = None,
        *,
        input: str = "",
        colors: bool = False,
    ) -> Stdio:
        streams.feed(input)
        return Stdio(
            argv if argv is not None else ["prog"],
            streams.stdout,
            streams.stderr,
            streams.stdin,
            colors=colors,
        )

    return _make
