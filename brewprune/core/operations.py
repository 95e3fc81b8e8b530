"""
Cascade removal of a formula and the dependencies it leaves unused.

The orphan set is recomputed from brew after every round of removals
instead of walking a dependency graph: brew is the only source of truth
and may change between steps.

    IDLE -> BASELINE_COMPUTED -> REMOVING -> RESCANNING -> (REMOVING | DONE)

The CLI handles all output through the progress callback; this module
never prints.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List

from .brew import Brew
from .orphans import list_orphans

logger = logging.getLogger(__name__)

# Progress events passed to the callback as (event, formula_name)
EVENT_REMOVING = 'removing'
EVENT_FOUND = 'found'
EVENT_DEPENDENCY = 'dependency'


class CascadeState(Enum):
    """Where a cascade removal currently is."""
    IDLE = "idle"
    BASELINE_COMPUTED = "baseline_computed"
    REMOVING = "removing"
    RESCANNING = "rescanning"
    DONE = "done"


@dataclass
class CascadeResult:
    """Outcome of a cascade removal."""
    target: str
    removed: List[str] = field(default_factory=list)  # In removal order
    refused: bool = False  # Target was a dependency, nothing removed


class CascadeRemover:
    """Remove a formula, then every formula that becomes an orphan because of it."""

    def __init__(self, brew: Brew, progress: Callable[[str, str], None] = None):
        """Initialize the remover.

        Args:
            brew: Brew wrapper used for queries and removals
            progress: Optional callback called with (event, name) where event
                is one of EVENT_REMOVING, EVENT_FOUND, EVENT_DEPENDENCY
        """
        self.brew = brew
        self.progress = progress
        self.state = CascadeState.IDLE

    def _notify(self, event: str, name: str):
        if self.progress:
            self.progress(event, name)

    def remove_with_dependencies(self, target: str) -> CascadeResult:
        """Remove target and cascade to newly unused dependencies.

        Target must itself be an orphan, otherwise nothing is removed.

        Args:
            target: Formula name to remove

        Returns:
            CascadeResult with the removed formulas

        Raises:
            BrewError: a brew call failed. Formulas removed before the failure
                stay removed.
        """
        result = CascadeResult(target=target)

        baseline = set(list_orphans(self.brew))
        self.state = CascadeState.BASELINE_COMPUTED

        if target not in baseline:
            logger.debug(f"{target} is not an orphan, refusing to remove it")
            self._notify(EVENT_DEPENDENCY, target)
            result.refused = True
            self.state = CascadeState.DONE
            return result

        targets = [target]
        while targets:
            self.state = CascadeState.REMOVING
            while targets:
                name = targets.pop()
                self._notify(EVENT_REMOVING, name)
                self.brew.remove(name)
                result.removed.append(name)

            self.state = CascadeState.RESCANNING
            for name in list_orphans(self.brew):
                if name not in baseline:
                    self._notify(EVENT_FOUND, name)
                    targets.append(name)

        self.state = CascadeState.DONE
        logger.debug(f"Cascade from {target} removed {len(result.removed)} formula(s)")
        return result
