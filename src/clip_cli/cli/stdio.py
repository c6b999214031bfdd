"""Standard input/output for console commands.

:class:`Stdio` combines the parsed command line with the three standard
streams.  Commands read their arguments and options from it and write
all output through it, which keeps them testable with in-memory
streams::

    stdio = Stdio(["prog", "greet", "Alice", "--loud"], stdout=io.StringIO())
    stdio.get_argument(0)      # "Alice"
    stdio.get_option("loud")   # True

Interactive prompts block on a line read from the input stream.  End of
input reads as an empty answer.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import IO, Any

from rich.style import Style

from clip_cli.core.models import ParsedInvocation
from clip_cli.core.parsing import parse_argv
from clip_cli.infra.terminal import (
    ERROR_STYLE,
    INFO_STYLE,
    WARNING_STYLE,
    colorize,
    supports_colors,
)

CONFIRM_ANSWERS: frozenset[str] = frozenset({"y", "yes", "1", "true"})
"""Lower-cased answers :meth:`Stdio.confirm` accepts as *yes*."""

INVALID_CHOICE_MESSAGE: str = "Invalid choice. Please try again."


class Stdio:
    """Parsed command line plus output, error and input streams.

    Parameters
    ----------
    argv:
        Raw arguments, program name first.  ``None`` means ``sys.argv``.
    stdout, stderr, stdin:
        Streams to use.  ``None`` picks the process stream current at
        construction time.
    colors:
        Force colored output on or off.  ``None`` detects support once
        from the environment and *stdout*.
    """

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
        stdin: IO[str] | None = None,
        *,
        colors: bool | None = None,
    ) -> None:
        self._stdout: IO[str] = stdout if stdout is not None else sys.stdout
        self._stderr: IO[str] = stderr if stderr is not None else sys.stderr
        self._stdin: IO[str] = stdin if stdin is not None else sys.stdin
        self._colors: bool = (
            supports_colors(self._stdout) if colors is None else colors
        )
        self._invocation: ParsedInvocation = parse_argv(
            sys.argv if argv is None else argv
        )

    # ------------------------------------------------------------------
    # Parsed input
    # ------------------------------------------------------------------

    @property
    def invocation(self) -> ParsedInvocation:
        return self._invocation

    @property
    def command(self) -> str:
        """The command name, ``""`` when none was given."""
        return self._invocation.command

    @property
    def arguments(self) -> list[str]:
        """All positional arguments, in order."""
        return list(self._invocation.arguments)

    def get_argument(self, index: int, default: str | None = None) -> str | None:
        """Return the positional argument at *index*, or *default*.

        Any index outside ``0 <= index < len(arguments)`` yields
        *default*; negative indexes do not count from the end.
        """
        arguments = self._invocation.arguments
        if 0 <= index < len(arguments):
            return arguments[index]
        return default

    @property
    def options(self) -> dict[str, str | bool]:
        """All options; flags given without ``=value`` are ``True``."""
        return dict(self._invocation.options)

    def get_option(
        self,
        name: str,
        default: str | bool | None = None,
    ) -> str | bool | None:
        """Return the value of option *name*, or *default* when absent."""
        return self._invocation.options.get(name, default)

    def has_option(self, name: str) -> bool:
        """Return whether option *name* was given, whatever its value."""
        return name in self._invocation.options

    @property
    def colors_enabled(self) -> bool:
        return self._colors

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write(self, message: str, newline: bool = True) -> None:
        """Write *message* to standard output as is."""
        self._emit(self._stdout, message, newline)

    def error(self, message: str, newline: bool = True) -> None:
        """Write *message* to standard error, in red."""
        self._emit(self._stderr, self._style(message, ERROR_STYLE), newline)

    def warning(
        self, message: str, newline: bool = True, *, to_stderr: bool = False,
    ) -> None:
        """Write *message* in yellow, to standard output unless *to_stderr*."""
        stream = self._stderr if to_stderr else self._stdout
        self._emit(stream, self._style(message, WARNING_STYLE), newline)

    def info(self, message: str, newline: bool = True) -> None:
        """Write *message* to standard output, in blue."""
        self._emit(self._stdout, self._style(message, INFO_STYLE), newline)

    def debug(self, message: str, newline: bool = True) -> None:
        self.write(message, newline)

    def verbose(self, message: str, newline: bool = True) -> None:
        self.write(message, newline)

    def writeln(self, message: str = "") -> None:
        self.write(message, True)

    def _style(self, message: str, style: Style) -> str:
        return colorize(message, style, enabled=self._colors)

    @staticmethod
    def _emit(stream: IO[str], message: str, newline: bool) -> None:
        stream.write(message + ("\n" if newline else ""))
        stream.flush()

    # ------------------------------------------------------------------
    # Interactive input
    # ------------------------------------------------------------------

    def _read_line(self) -> str:
        return self._stdin.readline().strip()

    def ask(self, question: str, default: str | None = None) -> str:
        """Prompt for a line of text.

        An empty answer returns *default*, or ``""`` without one.
        """
        prompt = question
        if default is not None:
            prompt += f" [{default}]"
        self.write(prompt + ": ", False)

        answer = self._read_line()
        if answer:
            return answer
        return default if default is not None else ""

    def confirm(self, question: str, default: bool = False) -> bool:
        """Prompt for a yes/no answer.

        ``y``, ``yes``, ``1`` and ``true`` (any case) mean yes, any other
        non-empty answer means no, and an empty one returns *default*.
        """
        hint = "Y/n" if default else "y/N"
        self.write(f"{question} [{hint}]: ", False)

        answer = self._read_line()
        if not answer:
            return default
        return answer.lower() in CONFIRM_ANSWERS

    def choice(
        self,
        question: str,
        choices: Sequence[str],
        default: str | None = None,
    ) -> str:
        """Prompt until one of *choices* is picked, by number or by value.

        All-digit answers are 1-based positions in the displayed list;
        other answers, including ``"2.0"``, must match a choice exactly.
        Anything unrecognised prints an error and asks again, with no
        retry limit; an empty answer only ends the loop when *default*
        is given.

        Raises
        ------
        ValueError
            If *choices* is empty.
        """
        if not choices:
            raise ValueError("Choices cannot be empty.")

        options = list(choices)
        default_index: int | None = None

        self.writeln(question)
        self.writeln()
        for index, value in enumerate(options, start=1):
            marker = ""
            if default is not None and default_index is None and value == default:
                default_index = index
                marker = " (default)"
            self.writeln(f"  [{index}] {value}{marker}")
        self.writeln()

        prompt = "Enter your choice"
        if default_index is not None:
            prompt += f" [{default_index}]"
        prompt += ": "

        while True:
            self.write(prompt, False)
            answer = self._read_line()

            if not answer and default is not None:
                return default

            if answer.isdecimal():
                position = int(answer)
                if 1 <= position <= len(options):
                    return options[position - 1]
            elif answer in options:
                return answer

            self.error(INVALID_CHOICE_MESSAGE)
