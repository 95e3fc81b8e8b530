"""
Formula metadata as returned by `brew info --json=v1`.

Only the fields used for orphan detection are decoded:

    full_name                                   -> Formula.full_name
    oldnames                                    -> Formula.oldnames
    dependencies                                -> Formula.dependencies
    build_dependencies                          -> Formula.build_dependencies
    versions.bottle                             -> Formula.bottle
    installed[].runtime_dependencies[].full_name -> InstalledVersion.runtime_dependencies

Decoding is strict. A missing key or a value of the wrong type raises
BrewDecodeError; records are never skipped. Extra keys are ignored.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import BrewDecodeError


def _field(record: Dict[str, Any], key: str, kind: type, where: str) -> Any:
    """Fetch record[key] and check its type."""
    if not isinstance(record, dict):
        raise BrewDecodeError(f"{where}: expected an object, got {type(record).__name__}")
    if key not in record:
        raise BrewDecodeError(f"{where}: missing field '{key}'")
    value = record[key]
    # bool is a subclass of int, never accept one for the other
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise BrewDecodeError(
            f"{where}: field '{key}' should be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _names(record: Dict[str, Any], key: str, where: str) -> List[str]:
    """Fetch a list of strings."""
    values = _field(record, key, list, where)
    for value in values:
        if not isinstance(value, str):
            raise BrewDecodeError(f"{where}: '{key}' contains a non-string entry {value!r}")
    return list(values)


@dataclass
class InstalledVersion:
    """One installed keg of a formula."""
    runtime_dependencies: List[str] = field(default_factory=list)  # full names linked at install

    @classmethod
    def from_json(cls, record: Dict[str, Any], where: str = 'installed') -> 'InstalledVersion':
        deps = []
        for entry in _field(record, 'runtime_dependencies', list, where):
            deps.append(_field(entry, 'full_name', str, f"{where}.runtime_dependencies"))
        return cls(runtime_dependencies=deps)


@dataclass
class Formula:
    """A formula as far as dependency bookkeeping is concerned."""
    full_name: str
    oldnames: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    build_dependencies: List[str] = field(default_factory=list)
    bottle: bool = False
    installed: List[InstalledVersion] = field(default_factory=list)

    @classmethod
    def from_json(cls, record: Dict[str, Any]) -> 'Formula':
        """Build a Formula from one element of the `brew info` array.

        Raises:
            BrewDecodeError: if the record does not match the expected schema
        """
        name = _field(record, 'full_name', str, 'formula')
        where = f"formula '{name}'"

        versions = _field(record, 'versions', dict, where)
        bottle = _field(versions, 'bottle', bool, f"{where}.versions")

        installed = [
            InstalledVersion.from_json(entry, f"{where}.installed")
            for entry in _field(record, 'installed', list, where)
        ]

        return cls(
            full_name=name,
            oldnames=_names(record, 'oldnames', where),
            dependencies=_names(record, 'dependencies', where),
            build_dependencies=_names(record, 'build_dependencies', where),
            bottle=bottle,
            installed=installed,
        )
