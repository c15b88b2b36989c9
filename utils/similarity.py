# -*- coding: utf-8 -*-
"""
utils/similarity.py
=====================
Case-insensitive common-substring helpers — zero external dependencies.

Comparison folds each character on its own (c.lower()), so positions in
the folded and the original string always line up.
"""
from __future__ import annotations

from typing import List, NamedTuple


class Match(NamedTuple):
    substring: str   # slice of the first argument, original case
    length: int
    start: int       # index in the first argument, -1 when nothing matched


NO_MATCH = Match("", 0, -1)


def _fold(s: str) -> List[str]:
    return [c.lower() for c in s]


def longest_common_substring(a: str, b: str) -> Match:
    """
    Longest contiguous run shared by a and b, ignoring case.

    Classic dynamic programming with one rolling row sized by the shorter
    string: O(len(a) * len(b)) time, O(min(len(a), len(b))) space.
    Among equally long matches the one starting earliest in a wins.
    """
    if not a or not b:
        return NO_MATCH

    fa, fb = _fold(a), _fold(b)
    # Iterate over the longer string, keep the row over the shorter one
    a_is_outer = len(fa) >= len(fb)
    outer, inner = (fa, fb) if a_is_outer else (fb, fa)

    row = [0] * (len(inner) + 1)
    best_len, best_start = 0, -1

    for i, oc in enumerate(outer, start=1):
        prev_diag = 0
        for j, ic in enumerate(inner, start=1):
            above = row[j]
            if oc == ic:
                row[j] = prev_diag + 1
                run = row[j]
                a_end = i if a_is_outer else j
                a_start = a_end - run
                if run > best_len or (run == best_len and a_start < best_start):
                    best_len, best_start = run, a_start
            else:
                row[j] = 0
            prev_diag = above

    if not best_len:
        return NO_MATCH
    return Match(a[best_start:best_start + best_len], best_len, best_start)


def find_folded(s: str, substring: str) -> int:
    """Index of the first case-insensitive occurrence of substring in s, or -1."""
    if not substring:
        return 0
    fs, fsub = _fold(s), _fold(substring)
    n = len(fsub)
    for i in range(len(fs) - n + 1):
        if fs[i:i + n] == fsub:
            return i
    return -1


def discount(s: str, substring: str) -> str:
    """
    Remove the first case-insensitive occurrence of substring from s.

    Returns s unchanged when substring is empty or does not occur.
    """
    if not substring:
        return s
    pos = find_folded(s, substring)
    if pos < 0:
        return s
    return s[:pos] + s[pos + len(substring):]


def contains_folded(haystack: str, needle: str) -> bool:
    return find_folded(haystack, needle) >= 0
