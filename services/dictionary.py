"""
services/dictionary.py
=======================
Dictionary collaborator used by the pattern detector.

The evaluator never reads word lists itself. Callers inject any object
with a contains(word) -> bool method (case-insensitive): an in-memory
WordList for tests and small deployments, or their own store backed by
whatever data source they maintain.
"""
from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Dictionary(Protocol):
    """Read-only, case-insensitive word lookup."""

    def contains(self, word: str) -> bool:
        ...


class WordList:
    """
    Immutable in-memory Dictionary.

    Words are stored lower-cased; lookups lower-case their argument, so
    WordList(["Secret"]).contains("SECRET") is True.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words: FrozenSet[str] = frozenset(
            w.strip().lower() for w in words if w and w.strip()
        )
        logger.debug(f"WordList created with {len(self._words)} words")

    def contains(self, word: str) -> bool:
        return word.lower() in self._words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordList({len(self._words)} words)"


EMPTY_DICTIONARY = WordList()
