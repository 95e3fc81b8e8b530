"""Errors raised when talking to brew."""

from typing import List


class BrewError(Exception):
    """Base class for every failure coming from the brew boundary."""


class BrewCommandError(BrewError):
    """Raised when brew cannot be run or exits with a non-zero status."""

    def __init__(self, command: List[str], returncode: int, stderr: str = ''):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"{' '.join(command)} failed: {detail}")


class BrewDecodeError(BrewError):
    """Raised when brew output is not text or does not match the expected schema."""
