"""Minimal glob matching over a single path component.

Supported syntax: ``*`` (any run of characters, possibly empty), ``?`` (exactly
one character). Everything else, backslash included, is a literal. A NUL can
never appear in a file name, so a pattern containing one is rejected. Case
folding is ASCII-only.
"""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Union

from .errors import InvalidPatternError


class Wildcard(enum.Enum):
    ANY_SEQUENCE = "*"
    ANY_CHAR = "?"


Token = Union[str, Wildcard]

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold_case(text: str) -> str:
    return text.translate(_ASCII_FOLD)


@dataclass(frozen=True)
class Pattern:
    source: str
    tokens: tuple[Token, ...]
    case_fold: bool = False

    def matches(self, name: str) -> bool:
        return match(self, name)


def _tokenize(source: str, case_fold: bool) -> tuple[Token, ...]:
    tokens: list[Token] = []
    for ch in source:
        if ch == "*":
            # a run of stars is the same as one star
            if not tokens or tokens[-1] is not Wildcard.ANY_SEQUENCE:
                tokens.append(Wildcard.ANY_SEQUENCE)
        elif ch == "?":
            tokens.append(Wildcard.ANY_CHAR)
        else:
            tokens.append(fold_case(ch) if case_fold else ch)
    return tuple(tokens)


def compile_pattern(source: str, case_fold: bool = False) -> Pattern:
    if "\0" in source:
        raise InvalidPatternError(source, "NUL character")
    return Pattern(source=source, tokens=_tokenize(source, case_fold), case_fold=case_fold)


def match(pattern: Pattern, name: str) -> bool:
    """Return True if ``name`` matches ``pattern`` in full.

    Classic wildcard scan: walk both strings with one cursor each and remember
    the most recent ``*``. On a mismatch, let that star swallow one more
    character of ``name`` and resume right after it. A later star supersedes an
    earlier one, so a single backtrack point is enough.
    """
    if pattern.case_fold:
        name = fold_case(name)
    tokens = pattern.tokens
    n_tokens = len(tokens)
    n_name = len(name)

    ti = ni = 0
    star_ti = -1
    star_ni = 0
    while ni < n_name:
        tok = tokens[ti] if ti < n_tokens else None
        if tok is Wildcard.ANY_SEQUENCE:
            star_ti, star_ni = ti, ni
            ti += 1
        elif tok is Wildcard.ANY_CHAR or (tok is not None and tok == name[ni]):
            ti += 1
            ni += 1
        elif star_ti >= 0:
            star_ni += 1
            ni = star_ni
            ti = star_ti + 1
        else:
            return False

    while ti < n_tokens and tokens[ti] is Wildcard.ANY_SEQUENCE:
        ti += 1
    return ti == n_tokens
