"""
Central configuration for brewprune.

Brew executable lookup order:
    1. $BREWPRUNE_BREW if set (explicit path or command name)
    2. `brew` found on PATH
    3. First existing standard Homebrew location
    4. Plain `brew` (a missing executable is reported when it is run)

The orphan detection itself reads no configuration: everything it needs
comes from brew's live state.
"""

import os
import shutil
from pathlib import Path

# Environment override for the brew executable
BREW_ENV_VAR = 'BREWPRUNE_BREW'

DEFAULT_BREW = 'brew'

# Default install locations: Apple Silicon, Intel macOS, Linuxbrew
STANDARD_BREW_PATHS = (
    Path('/opt/homebrew/bin/brew'),
    Path('/usr/local/bin/brew'),
    Path('/home/linuxbrew/.linuxbrew/bin/brew'),
)


def get_brew_command() -> str:
    """Return the brew executable to run.

    Returns:
        Path or command name of the brew executable
    """
    override = os.environ.get(BREW_ENV_VAR, '').strip()
    if override:
        return override

    found = shutil.which(DEFAULT_BREW)
    if found:
        return found

    for path in STANDARD_BREW_PATHS:
        if path.exists():
            return str(path)

    return DEFAULT_BREW
