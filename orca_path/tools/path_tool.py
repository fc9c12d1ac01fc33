"""
Command line helper for checking and converting component paths while authoring
model documents.

    orca-path normalize "a///b/../c/"
    orca-path relative /model/arm/elbow --from /model/leg/knee
    orca-path absolute ../wrist --base /model/arm/elbow
"""

import argparse
import sys

from orca_path.component.grammar import COMPONENT_GRAMMAR, PathGrammar
from orca_path.component.path import ComponentPath, normalize, split
from orca_path.log.orca_log import get_orca_logger

_logger = get_orca_logger()


def _cmd_normalize(args, grammar):
    return [normalize(p, grammar) for p in args.paths]


def _cmd_split(args, grammar):
    head, tail = split(args.path, grammar)
    return [f"{head}\t{tail}"]


def _cmd_absolute(args, grammar):
    base = ComponentPath(args.base, grammar)
    return [ComponentPath(args.path, grammar).form_absolute_path(base).to_string()]


def _cmd_relative(args, grammar):
    other = ComponentPath(args.other, grammar)
    return [ComponentPath(args.path, grammar).form_relative_path(other).to_string()]


def _cmd_parent(args, grammar):
    return [ComponentPath(args.path, grammar).get_parent_path_string()]


def _cmd_name(args, grammar):
    return [ComponentPath(args.path, grammar).get_component_name()]


def _cmd_level(args, grammar):
    return [ComponentPath(args.path, grammar).get_subcomponent_name_at_level(args.index)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="orca-path", description="Normalize and convert component paths.")
    parser.add_argument("--grammar", type=str, default=None, help="YAML file with separator and invalid_chars.")
    parser.add_argument("--log-level", type=str, default=None, help="Console log level (DEBUG, INFO, WARNING, ...).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("normalize", help="Print the canonical form of each path.")
    p.add_argument("paths", nargs="+")
    p.set_defaults(func=_cmd_normalize)

    p = subparsers.add_parser("split", help="Print head and tail separated by a tab.")
    p.add_argument("path")
    p.set_defaults(func=_cmd_split)

    p = subparsers.add_parser("absolute", help="Resolve a path against an absolute base.")
    p.add_argument("path")
    p.add_argument("--base", required=True)
    p.set_defaults(func=_cmd_absolute)

    p = subparsers.add_parser("relative", help="Relative path from OTHER to PATH.")
    p.add_argument("path")
    p.add_argument("--from", dest="other", required=True)
    p.set_defaults(func=_cmd_relative)

    p = subparsers.add_parser("parent", help="Print the parent path.")
    p.add_argument("path")
    p.set_defaults(func=_cmd_parent)

    p = subparsers.add_parser("name", help="Print the component name (last segment).")
    p.add_argument("path")
    p.set_defaults(func=_cmd_name)

    p = subparsers.add_parser("level", help="Print the segment at a 0-based level.")
    p.add_argument("path")
    p.add_argument("index", type=int)
    p.set_defaults(func=_cmd_level)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.log_level:
            _logger.set_console_level(args.log_level)
        grammar = PathGrammar.from_yaml(args.grammar) if args.grammar else COMPONENT_GRAMMAR
        lines = args.func(args, grammar)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
