"""
Main CLI entry point for brewprune

Commands:
- brewprune list / brewprune ls        formulas not used as a dependency
- brewprune rm-dep NAME / brewprune rd NAME
                                       remove NAME and its newly unused deps
"""

import argparse
import sys

from .. import __version__
from ..core.brew import Brew
from ..core.errors import BrewError, BrewCommandError
from .commands import cmd_list, cmd_rm_dep


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with all commands and aliases."""

    parser = argparse.ArgumentParser(
        prog='brewprune',
        description='A little brew helper to remove non needed formulas',
        epilog='Use "brewprune <command> --help" for command-specific help.'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'brewprune {__version__}'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output (debug logging on stderr)'
    )

    parser.add_argument(
        '--nocolor',
        action='store_true',
        help='Disable colored output'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        title='commands',
        metavar='<command>'
    )

    # =========================================================================
    # list / ls
    # =========================================================================
    subparsers.add_parser(
        'list', aliases=['ls'],
        help='List all formulas not used as deps'
    )

    # =========================================================================
    # rm-dep / rd
    # =========================================================================
    rm_dep_parser = subparsers.add_parser(
        'rm-dep', aliases=['rd'],
        help='Remove a formula with all unused deps'
    )
    rm_dep_parser.add_argument(
        'name',
        metavar='NAME',
        help='Name for a target formula'
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on verbose flag
    if args.verbose:
        import logging
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s - %(levelname)s - %(message)s',
            stream=sys.stderr
        )

    from . import colors
    colors.init(nocolor=args.nocolor)

    if not args.command:
        parser.print_help()
        return 1

    brew = Brew()

    try:
        if args.command in ('list', 'ls'):
            return cmd_list(args, brew)

        elif args.command in ('rm-dep', 'rd'):
            return cmd_rm_dep(args, brew)

        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130

    except BrewError as e:
        if args.verbose:
            import traceback
            traceback.print_exc()
        if isinstance(e, BrewCommandError) and e.stderr:
            # brew's own diagnostic, verbatim
            sys.stderr.write(e.stderr)
            if not e.stderr.endswith('\n'):
                sys.stderr.write('\n')
        else:
            print(colors.error(f"Error: {e}"), file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
