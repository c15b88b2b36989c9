"""
core/reasons.py — passwordcheck
================================
Closed set of rejection reasons returned by the evaluator.

Each Reason maps to one fixed human-readable message through
reason_message(); the mapping is a plain immutable table, never a
runtime registry.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Reason(str, Enum):
    """Why a candidate password was rejected."""

    EMPTY = "empty"
    FAILED = "failed"
    SAME = "same"
    SIMILAR = "similar"
    SHORT = "short"
    LONG = "long"
    SIMPLE_SHORT = "simpleshort"
    SIMPLE = "simple"
    PERSONAL = "personal"
    WORD = "word"
    SEQ = "seq"

    def __str__(self) -> str:
        return self.value


_MESSAGES = MappingProxyType({
    Reason.EMPTY:        "empty password",
    Reason.FAILED:       "check failed",
    Reason.SAME:         "is the same as the old one",
    Reason.SIMILAR:      "is based on the old one",
    Reason.SHORT:        "too short",
    Reason.LONG:         "too long",
    Reason.SIMPLE_SHORT: "not enough different characters or classes for this length",
    Reason.SIMPLE:       "not enough different characters or classes",
    Reason.PERSONAL:     "based on personal login information",
    Reason.WORD:         "based on a dictionary word and not a passphrase",
    Reason.SEQ:          "based on a common sequence of characters and not a passphrase",
})


def reason_message(reason: Reason) -> str:
    """Return the fixed message for a reason."""
    return _MESSAGES[reason]


__all__ = ["Reason", "reason_message"]
