"""
core/policy.py — passwordcheck
===============================
Password strength policy model.

Policy.min holds five tiers:

  min[0]  passwords made of one character class
  min[1]  passwords made of two character classes
  min[2]  passphrases (see passphrase_words)
  min[3]  passwords made of three character classes
  min[4]  passwords made of four character classes

A tier is either a non-negative length or DISABLED, which forbids that
kind of password regardless of its length. The "disabled" keyword of the
text format is handled by services.policy_parser only.

Usage:
    from core.policy import DEFAULT_POLICY, DISABLED

    strict = DEFAULT_POLICY.with_min(0, DISABLED).replace(max=64)
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Optional, Tuple, Union

from constants import MIN_TIERS, TIER_ONE_CLASS
from exceptions import InvalidPolicyError


class Tier(Enum):
    """Sentinel values for Policy.min entries."""

    DISABLED = "disabled"

    def __repr__(self) -> str:
        return "DISABLED"


DISABLED = Tier.DISABLED

MinLength = Union[int, Literal[Tier.DISABLED]]


def is_enabled(value: MinLength) -> bool:
    return value is not DISABLED


@dataclass(frozen=True)
class Policy:
    """
    Immutable password strength policy.

    Instances are validated on construction and never mutated afterwards,
    so one Policy may be shared by any number of concurrent checks.
    Use replace() / with_min() to derive a modified copy.
    """

    min: Tuple[MinLength, ...] = (DISABLED, 24, 11, 8, 7)
    max: int = 1024
    passphrase_words: int = 3
    match_length: int = 4
    deny_similar: bool = True

    _enabled: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        tiers = tuple(self.min)
        object.__setattr__(self, "min", tiers)

        if len(tiers) != MIN_TIERS:
            raise InvalidPolicyError(
                "min", tiers, f"expected {MIN_TIERS} values, got {len(tiers)}"
            )
        for index, value in enumerate(tiers):
            if value is DISABLED:
                continue
            if not _is_count(value):
                raise InvalidPolicyError(
                    f"min[{index}]", value, "must be a non-negative integer or DISABLED"
                )

        # Enabled tiers from min[1] onwards may not grow
        previous: Optional[int] = None
        for index in range(TIER_ONE_CLASS + 1, MIN_TIERS):
            value = tiers[index]
            if value is DISABLED:
                continue
            if previous is not None and value > previous:
                raise InvalidPolicyError(
                    f"min[{index}]", value, f"must not exceed the preceding tier ({previous})"
                )
            previous = value

        for name in ("max", "passphrase_words", "match_length"):
            if not _is_count(getattr(self, name)):
                raise InvalidPolicyError(
                    name, getattr(self, name), "must be a non-negative integer"
                )
        if not isinstance(self.deny_similar, bool):
            raise InvalidPolicyError("deny_similar", self.deny_similar, "must be a bool")

        enabled = tuple(v for v in tiers if v is not DISABLED)
        for index, value in enumerate(tiers):
            if value is not DISABLED and value > self.max:
                raise InvalidPolicyError(
                    f"min[{index}]", value, f"exceeds max ({self.max})"
                )
        object.__setattr__(self, "_enabled", enabled)

    # ─── derived views ────────────────────────────────────────────────────

    def enabled_min(self) -> List[int]:
        """Lengths of all enabled tiers, in index order."""
        return list(self._enabled)

    # ─── copies ───────────────────────────────────────────────────────────

    def replace(self, **changes) -> "Policy":
        """Return a validated copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def with_min(self, index: int, value: MinLength) -> "Policy":
        """Return a validated copy with min[index] set to value."""
        tiers = list(self.min)
        tiers[index] = value
        return self.replace(min=tuple(tiers))


def _is_count(value) -> bool:
    # bool is an int subclass but never a valid length
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


DEFAULT_POLICY = Policy()


__all__ = ["DEFAULT_POLICY", "DISABLED", "MinLength", "Policy", "Tier", "is_enabled"]
