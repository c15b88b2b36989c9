# -*- coding: utf-8 -*-
"""
tests/test_policy.py
======================
Tests for core.policy — defaults, invariants and validated copies.
"""
import pytest
from core.policy import DEFAULT_POLICY, DISABLED, Policy, is_enabled
from exceptions import InvalidPolicyError, ValidationError


class TestDefaultPolicy:

    def test_values(self):
        assert DEFAULT_POLICY.min == (DISABLED, 24, 11, 8, 7)
        assert DEFAULT_POLICY.max == 1024
        assert DEFAULT_POLICY.passphrase_words == 3
        assert DEFAULT_POLICY.match_length == 4
        assert DEFAULT_POLICY.deny_similar is True

    def test_equals_fresh_instance(self):
        assert Policy() == DEFAULT_POLICY

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_POLICY.max = 10

    def test_hashable(self):
        assert hash(Policy()) == hash(DEFAULT_POLICY)

    def test_enabled_views(self):
        assert DEFAULT_POLICY.enabled_min() == [24, 11, 8, 7]


class TestCopies:

    def test_with_min_returns_new_policy(self):
        p = DEFAULT_POLICY.with_min(0, 15)
        assert p.min[0] == 15
        assert DEFAULT_POLICY.min[0] is DISABLED

    def test_replace(self):
        p = DEFAULT_POLICY.replace(passphrase_words=0, deny_similar=False)
        assert p.passphrase_words == 0
        assert p.deny_similar is False
        assert p.min == DEFAULT_POLICY.min

    def test_min_list_stored_as_tuple(self):
        p = Policy(min=[DISABLED, 20, 10, 8, 6])
        assert isinstance(p.min, tuple)

    def test_all_disabled(self):
        p = Policy(min=(DISABLED,) * 5)
        assert p.enabled_min() == []
        assert not is_enabled(p.min[2])


class TestInvariants:

    def test_wrong_arity(self):
        with pytest.raises(InvalidPolicyError) as exc:
            Policy(min=(16, 17, 18, 19))
        assert exc.value.field == "min"

    def test_negative_min(self):
        with pytest.raises(InvalidPolicyError):
            Policy(min=(DISABLED, 24, 11, 8, -1))

    def test_bool_is_not_a_length(self):
        with pytest.raises(InvalidPolicyError):
            Policy(min=(DISABLED, 24, 11, 8, True))

    def test_increasing_tiers_rejected(self):
        with pytest.raises(InvalidPolicyError) as exc:
            Policy(min=(DISABLED, 8, 11, 8, 7))
        assert exc.value.field == "min[2]"

    def test_first_tier_unconstrained(self):
        p = Policy(min=(5, 24, 11, 8, 7))
        assert p.min[0] == 5

    def test_disabled_between_enabled_tiers(self):
        p = Policy(min=(DISABLED, 24, DISABLED, 8, 7))
        assert p.enabled_min() == [24, 8, 7]

    def test_min_above_max(self):
        with pytest.raises(InvalidPolicyError):
            DEFAULT_POLICY.replace(max=20)

    def test_first_tier_above_max(self):
        with pytest.raises(InvalidPolicyError):
            DEFAULT_POLICY.with_min(0, 2000)

    @pytest.mark.parametrize("field", ["max", "passphrase_words", "match_length"])
    def test_negative_counts(self, field):
        with pytest.raises(InvalidPolicyError):
            DEFAULT_POLICY.replace(**{field: -1})

    def test_deny_similar_must_be_bool(self):
        with pytest.raises(InvalidPolicyError):
            DEFAULT_POLICY.replace(deny_similar="deny")

    def test_invalid_policy_is_validation_error(self):
        with pytest.raises(ValidationError):
            Policy(min=())
