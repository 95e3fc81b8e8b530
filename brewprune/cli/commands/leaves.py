"""Orphan listing command."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.brew import Brew


def cmd_list(args, brew: 'Brew') -> int:
    """Handle list command - print formulas nothing depends on, one per line."""
    from ...core.orphans import list_orphans

    for name in list_orphans(brew):
        print(name)
    return 0
