"""Wrapper around the brew executable.

Three invocations are used:
    brew list --formula          installed formula names, whitespace separated
    brew info --json=v1 NAME...  JSON array of formula records
    brew rm NAME                 removal, only the exit status matters

Every call is blocking and runs exactly one process. Failures raise
BrewError subclasses and are never retried.
"""

import json
import logging
import subprocess
from typing import Iterable, List

from .config import get_brew_command
from .errors import BrewCommandError, BrewDecodeError
from .formula import Formula

logger = logging.getLogger(__name__)


class Brew:
    """Read (list/info) and remove operations on a Homebrew installation."""

    def __init__(self, command: str = None):
        self.cmd = command or get_brew_command()

    def _run(self, args: List[str]) -> bytes:
        """Run brew with args and return raw stdout.

        Raises:
            BrewCommandError: brew could not be started or exited non-zero
        """
        argv = [self.cmd] + args
        logger.debug(f"Running: {' '.join(argv)}")

        try:
            result = subprocess.run(argv, capture_output=True)
        except OSError as e:
            raise BrewCommandError(argv, -1, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode('utf-8', errors='replace')
            logger.debug(f"{' '.join(argv)} exited with {result.returncode}")
            raise BrewCommandError(argv, result.returncode, stderr)

        return result.stdout

    @staticmethod
    def _decode(output: bytes, what: str) -> str:
        try:
            return output.decode('utf-8')
        except UnicodeDecodeError as e:
            raise BrewDecodeError(f"unable to decode {what} output: {e}") from e

    def list_installed(self) -> List[str]:
        """Return the names of all installed formulas, in brew's order."""
        out = self._decode(self._run(['list', '--formula']), 'brew list')
        return out.split()

    def info(self, names: Iterable[str]) -> List[Formula]:
        """Fetch metadata for names in a single brew call.

        Args:
            names: Formula names

        Returns:
            List of Formula, in the order brew reports them

        Raises:
            BrewCommandError: brew info failed
            BrewDecodeError: output is not JSON or does not match the schema
        """
        names = list(names)
        if not names:
            # brew info with no argument means something else entirely
            return []

        out = self._decode(self._run(['info', '--json=v1'] + names), 'brew info')
        try:
            records = json.loads(out)
        except json.JSONDecodeError as e:
            raise BrewDecodeError(f"unable to parse brew info output: {e}") from e

        if not isinstance(records, list):
            raise BrewDecodeError(
                f"brew info output should be a JSON array, got {type(records).__name__}"
            )

        formulas = [Formula.from_json(record) for record in records]
        logger.debug(f"Fetched metadata for {len(formulas)} formula(s)")
        return formulas

    def remove(self, name: str) -> None:
        """Uninstall a single formula.

        Raises:
            BrewCommandError: brew rm failed
        """
        self._run(['rm', name])
