# -*- coding: utf-8 -*-
"""
utils/classifier.py
=====================
Pure character-class utilities — zero external dependencies.

Classes:
  digit       0-9
  lower       a-z
  upper       A-Z
  other       any other ASCII code point
  non-ASCII   code point >= 128, cannot be classified further

"other" and non-ASCII share one bucket when counting distinct classes,
so a password reaches at most four classes.
"""
from __future__ import annotations

from dataclasses import dataclass

from constants import (
    TIER_FOUR_CLASSES,
    TIER_ONE_CLASS,
    TIER_THREE_CLASSES,
    TIER_TWO_CLASSES,
)


@dataclass(frozen=True)
class ClassificationResult:
    digits: int = 0
    lowers: int = 0
    uppers: int = 0
    others: int = 0
    non_ascii: int = 0

    @property
    def length(self) -> int:
        return self.digits + self.lowers + self.uppers + self.others + self.non_ascii

    @property
    def has_digit(self) -> bool:
        return self.digits > 0

    @property
    def has_lower(self) -> bool:
        return self.lowers > 0

    @property
    def has_upper(self) -> bool:
        return self.uppers > 0

    @property
    def has_other(self) -> bool:
        """True for other-ASCII and non-ASCII characters alike."""
        return self.others > 0 or self.non_ascii > 0

    @property
    def classes(self) -> int:
        return sum([self.has_digit, self.has_lower, self.has_upper, self.has_other])


def classify(s: str) -> ClassificationResult:
    """Count the characters of s per class (by code point, never by byte)."""
    digits = lowers = uppers = others = non_ascii = 0
    for ch in s:
        if ch >= "\x80":
            non_ascii += 1
        elif "0" <= ch <= "9":
            digits += 1
        elif "a" <= ch <= "z":
            lowers += 1
        elif "A" <= ch <= "Z":
            uppers += 1
        else:
            others += 1
    return ClassificationResult(digits, lowers, uppers, others, non_ascii)


def tier_index(classes: int) -> int:
    """
    Policy.min index used for a password with the given number of classes.

      0 or 1 → min[0]
      2      → min[1]
      3      → min[3]
      4      → min[4]

    min[2] belongs to passphrases and is never selected here.
    """
    if classes <= 1:
        return TIER_ONE_CLASS
    if classes == 2:
        return TIER_TWO_CLASSES
    if classes == 3:
        return TIER_THREE_CLASSES
    return TIER_FOUR_CLASSES
