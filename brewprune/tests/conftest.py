"""Shared fixtures: an in-memory stand-in for the brew executable."""

from typing import Dict, List

import pytest

from brewprune.core.errors import BrewCommandError
from brewprune.core.formula import Formula, InstalledVersion


class FakeBrew:
    """In-memory brew with the same interface as brewprune.core.brew.Brew."""

    def __init__(self):
        self.formulas: Dict[str, Formula] = {}
        self.installed: List[str] = []
        self.calls: List[tuple] = []
        self.fail_remove = set()

    def add(self, name: str, deps: List[str] = None, build_deps: List[str] = None,
            runtime: List[str] = None, oldnames: List[str] = None,
            bottle: bool = True) -> Formula:
        formula = Formula(
            full_name=name,
            oldnames=oldnames or [],
            dependencies=deps or [],
            build_dependencies=build_deps or [],
            bottle=bottle,
            installed=[InstalledVersion(runtime_dependencies=runtime or [])],
        )
        self.formulas[name] = formula
        self.installed.append(name)
        return formula

    def list_installed(self) -> List[str]:
        self.calls.append(('list',))
        return list(self.installed)

    def info(self, names) -> List[Formula]:
        names = list(names)
        self.calls.append(('info', tuple(names)))
        return [self.formulas[name] for name in names]

    def remove(self, name: str) -> None:
        self.calls.append(('rm', name))
        if name in self.fail_remove or name not in self.installed:
            raise BrewCommandError(['brew', 'rm', name], 1, f"Error: No such keg: {name}\n")
        self.installed.remove(name)

    @property
    def removed(self) -> List[str]:
        return [call[1] for call in self.calls if call[0] == 'rm']


@pytest.fixture
def brew():
    """Empty fake brew installation."""
    return FakeBrew()


@pytest.fixture
def scenario_a(brew):
    """A depends on B; B and C have no dependents."""
    brew.add('A', deps=['B'])
    brew.add('B')
    brew.add('C')
    return brew
