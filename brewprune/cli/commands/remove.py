"""Cascade removal command."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.brew import Brew


def cmd_rm_dep(args, brew: 'Brew') -> int:
    """Handle rm-dep command - remove a formula and its newly unused deps."""
    from .. import colors
    from ...core.operations import (
        CascadeRemover, EVENT_REMOVING, EVENT_FOUND, EVENT_DEPENDENCY,
    )

    def report(event: str, name: str):
        if event == EVENT_REMOVING:
            print(f"Removing {colors.pkg_remove(name)}", flush=True)
        elif event == EVENT_FOUND:
            print(f"Found new unused dep: {colors.warning(name)}", flush=True)
        elif event == EVENT_DEPENDENCY:
            print(f"{colors.bold(name)} is some other formula dep")

    remover = CascadeRemover(brew, progress=report)
    remover.remove_with_dependencies(args.name)
    return 0
