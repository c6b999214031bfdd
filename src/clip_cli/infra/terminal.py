"""Infrastructure: terminal color support and ANSI styling.

Color support is decided from the environment, the platform and the
output stream itself:

* ``NO_COLOR`` set to anything (even empty) disables color, always.
  See https://no-color.org/.
* On Windows, ``ANSICON``, ``ConEmuANSI=ON`` or a console reporting
  virtual-terminal processing enables it.  The console
  probe only counts when the stream itself is a TTY.
* Elsewhere, the stream must be a TTY.  Streams without ``isatty`` are
  judged by a ``"t"`` in their ``mode``.

Styling is rendered by Rich as plain SGR escape sequences, so output
stays byte-predictable and no Rich console sits between us and the
stream.
"""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from typing import IO, Any

from rich.color import ColorSystem
from rich.style import Style

NO_COLOR_ENV: str = "NO_COLOR"
ANSICON_ENV: str = "ANSICON"
CONEMU_ANSI_ENV: str = "ConEmuANSI"

ERROR_STYLE: Style = Style(color="red")
WARNING_STYLE: Style = Style(color="yellow")
INFO_STYLE: Style = Style(color="blue")


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------

def supports_colors(
    stream: IO[Any],
    *,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Return whether ANSI colors should be written to *stream*.

    Parameters
    ----------
    stream:
        The output handle colored text would be written to.
    environ:
        Environment to consult.  Defaults to :data:`os.environ`.
    """
    env = os.environ if environ is None else environ

    if NO_COLOR_ENV in env:
        return False

    if platform.system() == "Windows":
        return (
            ANSICON_ENV in env
            or env.get(CONEMU_ANSI_ENV) == "ON"
            or (_is_tty(stream) and _windows_vt_enabled())
        )

    return _is_tty(stream)


def _windows_vt_enabled() -> bool:
    """Ask the Windows console whether virtual-terminal processing is on."""
    from rich._windows import get_windows_console_features

    return get_windows_console_features().vt


def _is_tty(stream: IO[Any]) -> bool:
    """Probe *stream* for a terminal, falling back to its mode string."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        mode = getattr(stream, "mode", "")
        return isinstance(mode, str) and "t" in mode
    try:
        return bool(isatty())
    except ValueError:
        # Closed file.
        return False


# ---------------------------------------------------------------------------
# Styling
# ---------------------------------------------------------------------------

def colorize(message: str, style: Style, *, enabled: bool) -> str:
    """Wrap *message* in the SGR codes for *style* when *enabled*."""
    if not enabled:
        return message
    return style.render(message, color_system=ColorSystem.STANDARD)
