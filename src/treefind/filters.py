from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from .models import Entry, EntryKind
from .pattern import Pattern, compile_pattern


@dataclass(frozen=True)
class TypeFilter:
    kind: EntryKind

    def accepts(self, entry: Entry) -> bool:
        return entry.kind is self.kind


@dataclass(frozen=True)
class NameFilter:
    pattern: Pattern

    def accepts(self, entry: Entry) -> bool:
        return self.pattern.matches(entry.name)


Filter = Union[TypeFilter, NameFilter]

_TYPE_CODES = {
    "f": EntryKind.FILE,
    "d": EntryKind.DIRECTORY,
}


def accepts(chain: Iterable[Filter], entry: Entry) -> bool:
    """AND of every filter in ``chain``; an empty chain accepts everything."""
    return all(f.accepts(entry) for f in chain)


def type_filter(code: str) -> TypeFilter:
    try:
        return TypeFilter(_TYPE_CODES[code])
    except KeyError:
        raise ValueError(f"invalid argument to -type: '{code}'") from None


def name_filter(source: str) -> NameFilter:
    return NameFilter(compile_pattern(source, case_fold=False))


def iname_filter(source: str) -> NameFilter:
    return NameFilter(compile_pattern(source, case_fold=True))
