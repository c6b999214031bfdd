"""Exit-code constants used by the console dispatcher.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
Commands may return any other integer; it is passed through as is.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit, or no command given and the listing was shown."""

GENERAL_ERROR: int = 1
"""Unknown command name, or the command raised while executing."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
