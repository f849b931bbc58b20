import os
import sys

from termpic.errors import TerminalError


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal attached to stdout."""
    if not sys.stdout.isatty():
        raise TerminalError("could not get terminal size: stdout is not a terminal")
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError) as e:
        raise TerminalError(f"could not get terminal size: {e}") from e
    return (size.columns, size.lines)
