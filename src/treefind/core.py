from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .errors import RootNotFoundError
from .filters import Filter, accepts
from .models import Entry, EntryKind

PROG = "treefind"


@dataclass(frozen=True)
class Options:
    maxdepth: int | None = None
    mindepth: int = 0
    quiet: bool = False


def _warn(options: Options, message: str) -> None:
    if not options.quiet:
        print(f"{PROG}: {message}", file=sys.stderr)


def search(
    roots: Sequence[str],
    chain: Iterable[Filter] = (),
    options: Options = Options(),
) -> Iterator[Entry]:
    if not roots:
        roots = ["."]
    chain = tuple(chain)

    for root in roots:
        for entry in walk(root, options):
            if entry.depth >= options.mindepth and accepts(chain, entry):
                yield entry


def walk(root: str, options: Options = Options()) -> Iterator[Entry]:
    """Yield ``root`` and everything beneath it, parents before children.

    Pending directories live on an explicit stack, so tree depth is bounded by
    memory rather than the interpreter's recursion limit. Only one directory
    handle is open at a time.
    """
    try:
        root_stat = os.lstat(root)
    except OSError as e:
        raise RootNotFoundError(root, e.strerror) from e

    kind = EntryKind.from_mode(root_stat.st_mode)
    if kind is not EntryKind.DIRECTORY:
        yield Entry(root, kind, 0)
        return

    try:
        root_handle = os.scandir(root)
    except OSError as e:
        raise RootNotFoundError(root, e.strerror) from e

    stack: list[tuple[str, int]] = []
    with root_handle:
        yield Entry(root, kind, 0)
        if options.maxdepth is None or options.maxdepth > 0:
            yield from _read_children(root, 0, root_handle, stack, options)

    while stack:
        cur_path, depth = stack.pop()
        try:
            handle = os.scandir(cur_path)
        except OSError as e:
            _warn(options, f"cannot read directory '{cur_path}': {e.strerror}")
            continue
        with handle:
            yield from _read_children(cur_path, depth, handle, stack, options)


def _read_children(
    cur_path: str,
    depth: int,
    handle: Iterator[os.DirEntry],
    stack: list[tuple[str, int]],
    options: Options,
) -> Iterator[Entry]:
    child_depth = depth + 1
    descend = options.maxdepth is None or child_depth < options.maxdepth
    try:
        for dirent in handle:
            path = os.path.join(cur_path, dirent.name)
            entry = Entry(path, EntryKind.from_direntry(dirent), child_depth)
            yield entry
            if descend and entry.is_dir:
                stack.append((entry.path, child_depth))
    except OSError as e:
        _warn(options, f"cannot read directory '{cur_path}': {e.strerror}")
