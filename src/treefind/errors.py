from __future__ import annotations


class FindError(Exception):
    """Base class for errors raised by treefind."""


class RootNotFoundError(FindError):
    def __init__(self, path: str, reason: str | None) -> None:
        self.path = path
        self.reason = reason or "No such file or directory"
        super().__init__(f"cannot access '{path}': {self.reason}")


class InvalidPatternError(FindError, ValueError):
    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")
