"""
services/policy_evaluator.py
=============================
Password / passphrase strength evaluation against a Policy.

Order of checks (the first failing check decides):

  1. EMPTY         no new password
  2. SAME          equal to the old password, ignoring case
  3. LONG          longer than policy.max
  4. SIMILAR       a long common substring with the old password (or the old
                   password reversed) leaves a weak remainder once discounted
  5. passphrase    enough words and min[2] met → every word must avoid
                   being a dictionary word (WORD) or a sequence (SEQ)
  6. class tiers   min[] tier selected by the number of character classes
                   → SHORT / SIMPLE_SHORT / SIMPLE, then weak patterns
                   → WORD / SEQ
  7. PERSONAL      derived from the user name
  8. accepted

"Discount mode" re-runs steps 5-7 on a password with a shared substring
removed; there a length shortfall is reported as SIMPLE_SHORT and any
reason at all means the remainder is weak.

The evaluator keeps no state between calls; the only collaborator is the
read-only dictionary injected at construction.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from constants import (
    MIN_SEQUENCE_LENGTH,
    TIER_FOUR_CLASSES,
    TIER_PASSPHRASE,
    TIER_TWO_CLASSES,
)
from core.policy import DISABLED, Policy
from core.reasons import Reason, reason_message
from exceptions import DictionaryError, WeakPasswordError
from services.dictionary import EMPTY_DICTIONARY
from utils.classifier import classify, tier_index
from utils.patterns import PatternDetector
from utils.similarity import contains_folded, discount, longest_common_substring

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckOutcome:
    """Result of one check: accepted, or rejected for exactly one Reason."""

    reason: Optional[Reason] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str:
        return "" if self.reason is None else reason_message(self.reason)

    def raise_for_reason(self) -> None:
        """Raise WeakPasswordError if the password was rejected."""
        if self.reason is not None:
            raise WeakPasswordError(self.reason)

    def __bool__(self) -> bool:
        return self.accepted


ACCEPTED = CheckOutcome()


class PolicyEvaluator:
    """
    Stateless evaluator; one instance may serve concurrent callers.

    Usage:
        evaluator = PolicyEvaluator(WordList(["password", "dragon"]))
        outcome = evaluator.check(DEFAULT_POLICY, new, old_password=old, username=login)
        if not outcome.accepted:
            print(outcome.message)
    """

    def __init__(self, dictionary=None):
        self.detector = PatternDetector(dictionary if dictionary is not None else EMPTY_DICTIONARY)

    # ─── public API ───────────────────────────────────────────────────────

    def check(
            self,
            policy: Policy,
            new_password: Optional[str],
            old_password: Optional[str] = None,
            username: Optional[str] = None,
    ) -> CheckOutcome:
        """
        Judge new_password against policy.

        old_password / username: None means "not supplied" and skips the
        related comparisons; "" is a real (empty) value and takes part.
        """
        try:
            reason = self._evaluate(policy, new_password, old_password, username)
        except DictionaryError as e:
            logger.error(f"Password check failed: {e}")
            reason = Reason.FAILED

        # never log the password itself
        logger.debug(f"Password check result: {reason or 'accepted'}")
        return ACCEPTED if reason is None else CheckOutcome(reason)

    def enforce(
            self,
            policy: Policy,
            new_password: Optional[str],
            old_password: Optional[str] = None,
            username: Optional[str] = None,
    ) -> None:
        """Like check(), but raises WeakPasswordError on rejection."""
        self.check(policy, new_password, old_password, username).raise_for_reason()

    # ─── state machine ────────────────────────────────────────────────────

    def _evaluate(self, policy, new, old, username) -> Optional[Reason]:
        if not new:
            return Reason.EMPTY

        if old is not None and new.lower() == old.lower():
            return Reason.SAME

        if len(new) > policy.max:
            return Reason.LONG

        if policy.match_length and policy.deny_similar and old is not None:
            if self._is_based(policy, new, old, username):
                return Reason.SIMILAR

        return self._judge(policy, new, username, discounted=False)

    def _judge(self, policy, password, username, discounted) -> Optional[Reason]:
        """Steps 5-7 on password (or on a discounted remainder)."""
        reason = self._strength(policy, password, discounted)
        if reason is not None:
            return reason
        if username is not None and self._is_personal(policy, password, username):
            return Reason.PERSONAL
        return None

    def _strength(self, policy, password, discounted) -> Optional[Reason]:
        length = len(password)

        # 5. passphrase
        if self._is_passphrase(policy, password):
            return self._weak_word(password)

        # 6. class tiers
        tier = policy.min[tier_index(classify(password).classes)]
        if tier is DISABLED:
            # length is judged against min[4], simplicity against min[1]
            min_four = policy.min[TIER_FOUR_CLASSES]
            min_two = policy.min[TIER_TWO_CLASSES]
            if not discounted and min_four is not DISABLED and length < min_four:
                return Reason.SHORT
            if min_two is not DISABLED and length < min_two:
                return Reason.SIMPLE_SHORT
            return Reason.SIMPLE
        if length < tier:
            return Reason.SIMPLE_SHORT if discounted else Reason.SHORT

        return self._weak_pattern(policy, password, discounted)

    def _is_passphrase(self, policy, password) -> bool:
        if not policy.passphrase_words:
            return False
        min_passphrase = policy.min[TIER_PASSPHRASE]
        if min_passphrase is DISABLED:
            return False
        return (len(password.split()) >= policy.passphrase_words
                and len(password) >= min_passphrase)

    def _weak_word(self, password) -> Optional[Reason]:
        for word in password.split():
            if self.detector.is_dictionary_word(word):
                return Reason.WORD
            if self.detector.is_sequence(word):
                return Reason.SEQ
        return None

    def _weak_pattern(self, policy, password, discounted) -> Optional[Reason]:
        if self.detector.is_dictionary_word(password):
            return Reason.WORD
        if self.detector.is_sequence(password):
            return Reason.SEQ

        # Enough words for a passphrase but too short for min[2]: the words
        # are still held to the passphrase rules
        if policy.passphrase_words and len(password.split()) >= policy.passphrase_words:
            reason = self._weak_word(password)
            if reason is not None:
                return reason

        # A remainder is discounted once; its own tokens are not searched
        if discounted or not policy.match_length:
            return None

        # Words and sequences embedded in a longer password only count
        # when the rest of the password is weak on its own
        min_token = max(policy.match_length, MIN_SEQUENCE_LENGTH)
        for token in self.detector.tokens(password, min_token):
            if token == password:
                continue
            if self.detector.is_dictionary_word(token):
                found = Reason.WORD
            elif self.detector.is_sequence(token):
                found = Reason.SEQ
            else:
                continue
            if self._strength(policy, discount(password, token), discounted=True) is not None:
                return found
        return None

    # ─── comparisons with known strings ───────────────────────────────────

    def _is_based(self, policy, password, needle, username=None) -> bool:
        """
        True when a common substring of at least match_length characters with
        needle (forwards or reversed) leaves a weak password once removed.
        """
        for candidate in (needle, needle[::-1]):
            match = longest_common_substring(password, candidate)
            if not match.length or match.length < policy.match_length:
                continue
            remainder = discount(password, match.substring)
            if self._judge(policy, remainder, username, discounted=True) is not None:
                return True
        return False

    def _is_personal(self, policy, password, username) -> bool:
        if not username:
            return False
        if contains_folded(username, password):
            return True
        if not policy.match_length:
            return False
        if len(username) >= policy.match_length and contains_folded(password, username):
            return True
        return self._is_based(policy, password, username)


_default_evaluator = PolicyEvaluator()


def check(
        policy: Policy,
        new_password: Optional[str],
        old_password: Optional[str] = None,
        username: Optional[str] = None,
        dictionary=None,
) -> CheckOutcome:
    """Convenience wrapper; uses an empty dictionary unless one is given."""
    evaluator = _default_evaluator if dictionary is None else PolicyEvaluator(dictionary)
    return evaluator.check(policy, new_password, old_password, username)
