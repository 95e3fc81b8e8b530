"""CLI command modules."""

from .leaves import cmd_list
from .remove import cmd_rm_dep

__all__ = [
    'cmd_list',
    'cmd_rm_dep',
]
