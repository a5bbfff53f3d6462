from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass


class EntryKind(enum.Enum):
    FILE = "f"
    DIRECTORY = "d"
    OTHER = "o"  # symlinks, devices, sockets, fifos, vanished entries

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER

    @classmethod
    def from_direntry(cls, entry: os.DirEntry) -> EntryKind:
        try:
            if entry.is_dir(follow_symlinks=False):
                return cls.DIRECTORY
            if entry.is_file(follow_symlinks=False):
                return cls.FILE
        except OSError:
            pass
        return cls.OTHER


@dataclass(frozen=True)
class Entry:
    """A single discovered filesystem entry.

    ``path`` keeps the root argument as its prefix, so it is printed exactly as
    the user would expect from ``find``.
    """

    path: str
    kind: EntryKind
    depth: int = 0

    @property
    def name(self) -> str:
        return os.path.basename(self.path.rstrip(os.sep)) or self.path

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
