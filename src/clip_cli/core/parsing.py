"""Pure command-line parsing.

Every function in this module is a **pure** transformation: no I/O, no
side effects, fully deterministic.

Grammar (applied after dropping the program name):

1. **Command**: the first remaining token.
2. **Option**: any later token starting with ``--``.  ``--key=value``
   splits on the first ``=`` only; ``--key`` alone is the flag ``True``.
3. **Argument**: every other token, order preserved.

Malformed tokens such as ``--=value`` or a bare ``--`` are accepted
literally; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from clip_cli.core.models import ParsedInvocation

OPTION_PREFIX: str = "--"


def parse_option(token: str) -> tuple[str, str | bool]:
    """Split a ``--key[=value]`` token into its key and value.

    The caller guarantees *token* starts with :data:`OPTION_PREFIX`.
    """
    body = token[len(OPTION_PREFIX):]
    key, sep, value = body.partition("=")
    if not sep:
        return body, True
    return key, value


def parse_argv(argv: Sequence[str]) -> ParsedInvocation:
    """Parse a raw argument list, program name first, into an invocation."""
    tokens = list(argv[1:])
    if not tokens:
        return ParsedInvocation()

    command = tokens[0]
    arguments: list[str] = []
    options: dict[str, str | bool] = {}

    for token in tokens[1:]:
        if token.startswith(OPTION_PREFIX):
            key, value = parse_option(token)
            options[key] = value
        else:
            arguments.append(token)

    return ParsedInvocation(
        command=command,
        arguments=tuple(arguments),
        options=MappingProxyType(options),
    )
