"""
brewprune - Remove Homebrew formulas nothing depends on

A small helper around the brew command:
- List installed formulas that are not a dependency of anything else
- Remove a formula together with the dependencies it leaves unused
"""

__version__ = "0.1.0"
__author__ = "brewprune contributors"
