"""Orphan formula detection.

A formula is an orphan when no installed formula needs it, through any of:
- its declared dependencies
- the runtime dependencies actually linked by an installed version
- its build dependencies, when it has no bottle (built from source)

Formulas renamed by Homebrew keep their old names around in other
formulas' dependency lists, so an old name counts as used as soon as the
current name does.
"""

import logging
from typing import Dict, Iterable, List, Set, TYPE_CHECKING

from .formula import Formula

if TYPE_CHECKING:
    from .brew import Brew

logger = logging.getLogger(__name__)


def build_dependency_set(formulas: Iterable[Formula]) -> Set[str]:
    """Compute the names required by at least one of formulas.

    Args:
        formulas: Metadata of the installed formulas

    Returns:
        Set of formula names used as a dependency, old names included
    """
    renames: Dict[str, str] = {}  # oldname -> full_name
    used: Set[str] = set()

    for formula in formulas:
        for oldname in formula.oldnames:
            renames[oldname] = formula.full_name

        used.update(formula.dependencies)

        for version in formula.installed:
            used.update(version.runtime_dependencies)

        if formula.bottle:
            continue

        used.update(formula.build_dependencies)

    # Only the new name implies the old one, never the reverse
    for oldname, newname in renames.items():
        if newname in used:
            used.add(oldname)

    return used


def dependency_set(brew: 'Brew', names: List[str]) -> Set[str]:
    """Fetch metadata for names in one batch and build their dependency set."""
    return build_dependency_set(brew.info(names))


def find_orphans(installed: List[str], dependencies: Set[str]) -> List[str]:
    """Return installed names not in dependencies, keeping installed order."""
    return [name for name in installed if name not in dependencies]


def list_orphans(brew: 'Brew') -> List[str]:
    """Query brew and return the installed formulas nothing depends on."""
    installed = brew.list_installed()
    used = dependency_set(brew, installed)
    orphans = find_orphans(installed, used)
    logger.debug(f"{len(orphans)} orphan(s) among {len(installed)} installed formula(s)")
    return orphans
