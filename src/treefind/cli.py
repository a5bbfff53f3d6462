from __future__ import annotations

import argparse
import contextlib
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from .core import PROG, Options, search
from .errors import RootNotFoundError
from .filters import Filter, iname_filter, name_filter, type_filter


def _filter_arg(build: Callable[[str], Filter]) -> Callable[[str], Filter]:
    def convert(value: str) -> Filter:
        try:
            return build(value)
        except ValueError as e:  # includes InvalidPatternError
            raise argparse.ArgumentTypeError(str(e)) from e

    return convert


def _depth_arg(value: str) -> int:
    message = f"expected a non-negative integer, got '{value}'"
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(message) from None
    if depth < 0:
        raise argparse.ArgumentTypeError(message)
    return depth


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Walk directory trees and print the entries matching every filter.",
    )
    p.add_argument("paths", nargs="*", default=["."], help="Root paths to search")

    # all filters share one destination so they keep command-line order
    p.add_argument(
        "-type",
        dest="filters",
        action="append",
        type=_filter_arg(type_filter),
        metavar="{f,d}",
        help="Filter by entry type: f=file, d=dir",
    )
    p.add_argument(
        "-name",
        dest="filters",
        action="append",
        type=_filter_arg(name_filter),
        metavar="PATTERN",
        help="Glob pattern (*, ?) to match names, case-sensitive",
    )
    p.add_argument(
        "-iname",
        dest="filters",
        action="append",
        type=_filter_arg(iname_filter),
        metavar="PATTERN",
        help="Case-insensitive glob pattern to match names",
    )
    p.add_argument(
        "-maxdepth", type=_depth_arg, help="Descend at most N levels (0 means roots only)"
    )
    p.add_argument(
        "-mindepth", type=_depth_arg, default=0, help="Don't print entries shallower than N"
    )
    p.add_argument(
        "-print0",
        action="store_true",
        help="Separate output with NUL instead of newline",
    )
    p.add_argument("-q", "--quiet", action="store_true", help="Suppress error messages")
    return p


def emit(paths: Iterable[str], stream: TextIO, terminator: str = "\n") -> None:
    for path in paths:
        stream.write(path)
        stream.write(terminator)
    stream.flush()


def _search_roots(
    roots: Sequence[str], filters: Sequence[Filter], opts: Options, failed: list[str]
) -> Iterable[str]:
    """Yield matching paths root by root; roots that cannot be walked go to ``failed``."""
    for root in roots:
        try:
            for entry in search([root], filters, opts):
                yield entry.path
        except RootNotFoundError as e:
            failed.append(root)
            if not opts.quiet:
                print(f"{PROG}: {e}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)

    opts = Options(
        maxdepth=ns.maxdepth,
        mindepth=ns.mindepth,
        quiet=ns.quiet,
    )
    filters = tuple(ns.filters or ())
    terminator = "\0" if ns.print0 else "\n"

    failed: list[str] = []
    try:
        emit(_search_roots(ns.paths, filters, opts, failed), sys.stdout, terminator)
    except BrokenPipeError:
        with contextlib.suppress(Exception):
            sys.stdout.close()
        return 0

    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
