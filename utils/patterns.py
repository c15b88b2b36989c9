# -*- coding: utf-8 -*-
"""
utils/patterns.py
===================
Weak-pattern detection: dictionary words and trivial character sequences.

Dictionary lookups go through the injected services.dictionary.Dictionary;
any failure inside the lookup is re-raised as DictionaryError so the
evaluator can report it as a failed check.
"""
from __future__ import annotations

import re
from typing import List

from constants import KEYBOARD_ROWS, LEET_SUBSTITUTIONS, MIN_SEQUENCE_LENGTH
from exceptions import DictionaryError

_LEET_TABLE = str.maketrans(LEET_SUBSTITUTIONS)

# Letter runs (any script) and ASCII digit runs
_TOKEN_RE = re.compile(r"[^\W\d_]+|[0-9]+")

_KEYBOARD_WALKS = tuple(KEYBOARD_ROWS) + tuple(row[::-1] for row in KEYBOARD_ROWS)


def unleet(s: str) -> str:
    """Lower-case s and undo common leet-speak substitutions (p4$$w0rd → password)."""
    return s.lower().translate(_LEET_TABLE)


def is_repeated(s: str) -> bool:
    return len(s) >= MIN_SEQUENCE_LENGTH and len(set(s.lower())) == 1


def is_monotonic_run(s: str) -> bool:
    """True for runs of adjacent code points such as abcde or 54321."""
    if len(s) < MIN_SEQUENCE_LENGTH:
        return False
    points = [ord(c) for c in s.lower()]
    step = points[1] - points[0]
    if step not in (1, -1):
        return False
    return all(b - a == step for a, b in zip(points, points[1:]))


def is_keyboard_walk(s: str) -> bool:
    if len(s) < MIN_SEQUENCE_LENGTH:
        return False
    lowered = s.lower()
    return any(lowered in row for row in _KEYBOARD_WALKS)


def is_sequence(s: str) -> bool:
    """True when the whole of s is a run, a keyboard walk or one repeated character."""
    return is_repeated(s) or is_monotonic_run(s) or is_keyboard_walk(s)


def tokens(s: str, min_length: int = MIN_SEQUENCE_LENGTH) -> List[str]:
    """Maximal letter runs and digit runs of s that are at least min_length long."""
    return [t for t in _TOKEN_RE.findall(s) if len(t) >= min_length]


class PatternDetector:
    """Flags dictionary words and sequences; holds only the injected lookup."""

    def __init__(self, dictionary):
        self.dictionary = dictionary

    def _lookup(self, word: str) -> bool:
        try:
            return bool(self.dictionary.contains(word))
        except Exception as e:
            raise DictionaryError(
                "Dictionary lookup failed", code="DICTIONARY_LOOKUP", detail=str(e)
            ) from e

    def is_dictionary_word(self, token: str) -> bool:
        """Check token against the dictionary, raw first and then de-leeted."""
        if not token:
            return False
        lowered = token.lower()
        if self._lookup(lowered):
            return True
        substituted = unleet(lowered)
        return substituted != lowered and self._lookup(substituted)

    # Sequence detection is pure; exposed here so callers need one object
    is_sequence = staticmethod(is_sequence)
    tokens = staticmethod(tokens)
