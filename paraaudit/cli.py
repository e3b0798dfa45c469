"""The ``para`` command line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from paraaudit import audit as audit_mod
from paraaudit import launch, layout, search
from paraaudit.core import (
    ParaError,
    eprint_modules,
    get_module_paths,
    print_count,
    print_modules,
)


def resolve_module(name: str, precision: float) -> Path:
    """Find a module by exact name, falling back to a unique fuzzy match."""
    exact = search.find_module(name)
    if exact is not None:
        return exact
    candidates = search.search_modules(name, precision)
    if len(candidates) == 1:
        return candidates[0]
    if len(candidates) > 1:
        eprint_modules(candidates)
        raise ParaError("ambiguous module name")
    raise ParaError("can't find a match")


def _audit(args: argparse.Namespace) -> None:
    audit_mod.audit(10 if args.level is None else args.level)


def _search(args: argparse.Namespace) -> None:
    print_modules(search.search_modules(args.search_string, 0.8), True)


def _list(args: argparse.Namespace) -> None:
    if args.root in ("all", "a"):
        modules = get_module_paths()
    else:
        modules = search.list_rooted_modules(args.root or "projects")
    print_modules(modules, True)


def _open(args: argparse.Namespace) -> None:
    launch.open_module(resolve_module(args.module, 0.8))


def _move(args: argparse.Namespace) -> None:
    module = resolve_module(args.module, 1.0)
    root = search.find_root(args.destroot)
    if root is None:
        raise ParaError("invalid destination name")
    layout.mv(module, root)


def _stats(args: argparse.Namespace) -> None:
    audit_mod.stats(100 if args.min_count is None else args.min_count)


def _new(args: argparse.Namespace) -> None:
    if args.root is not None:
        root = search.find_root(args.root)
        if root is None:
            raise ParaError(f"invalid root name - {args.root}")
    else:
        root = search.find_root("projects")
        if root is None:
            raise ParaError("can't find `projects` folder, something very wrong")
    layout.new(root / args.name)


def _note(args: argparse.Namespace) -> None:
    module = search.find_module(args.module)
    if module is None:
        raise ParaError("can't find module")
    launch.edit_note(module / "README.md")


def _tags(args: argparse.Namespace) -> None:
    minimum = 5 if args.count is None else args.count
    tags = sorted(search.get_all_tags(), key=lambda item: -item[1])
    for tag, count in tags:
        if count >= minimum:
            print_count(tag, count)


def _fix(args: argparse.Namespace) -> None:
    audit_mod.propose_fixes(10 if args.level is None else args.level)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for every ``para`` subcommand."""
    parser = argparse.ArgumentParser(
        prog="para",
        description="Supervise and work with a PARA-organised storage tree.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("audit", aliases=["a"], help="audit para system")
    p.add_argument("level", nargs="?", type=int, help="level of verbosity to show, 0->10")
    p.set_defaults(handler=_audit)

    p = sub.add_parser("search", aliases=["s"], help="search para modules")
    p.add_argument("search_string", help="string to search for in para modules")
    p.set_defaults(handler=_search)

    p = sub.add_parser(
        "list", aliases=["ls"], help="list all para modules, optionally by module type"
    )
    p.add_argument(
        "root",
        nargs="?",
        help="module type (e.g., [projects], areas, resources, archive, all)",
    )
    p.set_defaults(handler=_list)

    p = sub.add_parser("open", aliases=["o"], help="open a module to work on")
    p.add_argument("module", help="module name or substring")
    p.set_defaults(handler=_open)

    p = sub.add_parser("move", aliases=["mv"], help="move a module between roots")
    p.add_argument("module", help="module name or substring")
    p.add_argument(
        "destroot", help="destination root (e.g., projects, areas, resources, archive)"
    )
    p.set_defaults(handler=_move)

    p = sub.add_parser("stats", aliases=["st"], help="print para stats (filecount, etc.)")
    p.add_argument(
        "min_count", nargs="?", type=int, help="minimum count for showing extensions"
    )
    p.set_defaults(handler=_stats)

    p = sub.add_parser("new", help="create a new module, by default in the projects root")
    p.add_argument("name", help="name of the module")
    p.add_argument("root", nargs="?", help="which root")
    p.set_defaults(handler=_new)

    p = sub.add_parser(
        "note", aliases=["edit"], help="edit the README.md of a particular module"
    )
    p.add_argument("module", help="name of the module")
    p.set_defaults(handler=_note)

    p = sub.add_parser("tags", help="list all tags")
    p.add_argument(
        "count", nargs="?", type=int, help="hide tags with less than count occurrences"
    )
    p.set_defaults(handler=_tags)

    p = sub.add_parser("fix", help="list fixes to problems identified by audit")
    p.add_argument("level", nargs="?", type=int)
    p.set_defaults(handler=_fix)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``para`` command and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        args.handler(args)
    except ParaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())