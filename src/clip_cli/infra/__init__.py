"""Infrastructure layer: operating system and terminal probing.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from clip_cli.infra.terminal import colorize, supports_colors

__all__: list[str] = [
    "colorize",
    "supports_colors",
]
