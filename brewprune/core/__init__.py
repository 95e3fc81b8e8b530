"""Core modules for brewprune"""

from .brew import Brew
from .errors import BrewError, BrewCommandError, BrewDecodeError
from .formula import Formula, InstalledVersion

__all__ = [
    'Brew',
    'BrewError',
    'BrewCommandError',
    'BrewDecodeError',
    'Formula',
    'InstalledVersion',
]
