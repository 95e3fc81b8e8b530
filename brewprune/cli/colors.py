"""Color output support for the brewprune CLI.

Color palette:
  - Red: errors and formulas being removed
  - Orange: newly found unused dependencies
"""

import os
import sys

# ANSI color codes
_COLORS = {
    'reset': '\033[0m',
    'bold': '\033[1m',
    'red': '\033[91m',
    'orange': '\033[93m',   # No true orange in ANSI
}

# Global state
_colors_enabled = True


def init(nocolor: bool = False):
    """Initialize color support.

    Args:
        nocolor: If True, disable colors unconditionally
    """
    global _colors_enabled

    if nocolor:
        _colors_enabled = False
    elif os.environ.get('NO_COLOR'):
        # https://no-color.org/
        _colors_enabled = False
    elif not sys.stdout.isatty():
        _colors_enabled = False
    else:
        _colors_enabled = True


def enabled() -> bool:
    """Return True if colors are enabled."""
    return _colors_enabled


def _wrap(text: str, color: str) -> str:
    if not _colors_enabled:
        return text
    return f"{_COLORS.get(color, '')}{text}{_COLORS['reset']}"


def error(text: str) -> str:
    """Format text as error (red)."""
    return _wrap(text, 'red')


def warning(text: str) -> str:
    """Format text as warning (orange/yellow)."""
    return _wrap(text, 'orange')


def bold(text: str) -> str:
    return _wrap(text, 'bold')


def pkg_remove(name: str) -> str:
    """Format formula name for removal (red)."""
    return error(name)
