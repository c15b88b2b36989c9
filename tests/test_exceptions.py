# -*- coding: utf-8 -*-
"""
tests/test_exceptions.py
==========================
Tests for the passwordcheck hierarchical exception system.
All pure Python.
"""
import pytest
from core.reasons import Reason
from exceptions import (
    PasswordCheckError,
    ValidationError, InvalidPolicyError, PolicySyntaxError, WeakPasswordError,
    ServiceError, DictionaryError,
    ConfigurationError,
)


# ── inheritance hierarchy ─────────────────────────────────────────────────────

class TestInheritance:

    def test_all_inherit_from_password_check_error(self):
        errs = [
            ValidationError, InvalidPolicyError, PolicySyntaxError, WeakPasswordError,
            ServiceError, DictionaryError,
            ConfigurationError,
        ]
        for err_cls in errs:
            assert issubclass(err_cls, PasswordCheckError), f"{err_cls} must inherit PasswordCheckError"

    def test_validation_errors_chain(self):
        assert issubclass(InvalidPolicyError, ValidationError)
        assert issubclass(PolicySyntaxError, ValidationError)
        assert issubclass(WeakPasswordError, ValidationError)

    def test_service_errors_chain(self):
        assert issubclass(DictionaryError, ServiceError)


# ── PasswordCheckError attributes ─────────────────────────────────────────────

class TestPasswordCheckError:

    def test_message_stored(self):
        e = PasswordCheckError("test message")
        assert e.message == "test message"
        assert str(e) == "test message"

    def test_code_stored(self):
        e = PasswordCheckError("msg", code="ERR_001")
        assert e.code == "ERR_001"

    def test_str_with_detail(self):
        e = PasswordCheckError("main message", detail="detail info")
        s = str(e)
        assert "main message" in s
        assert "detail info" in s

    def test_defaults(self):
        e = PasswordCheckError()
        assert e.message == ""
        assert e.code == ""
        assert e.detail == ""


# ── specific errors ───────────────────────────────────────────────────────────

class TestInvalidPolicyError:

    def test_fields(self):
        e = InvalidPolicyError("max", -1, "must be a non-negative integer")
        assert e.field == "max"
        assert e.value == -1
        assert "max" in str(e)
        assert "-1" in str(e)
        assert e.code == "POLICY_INVALID"


class TestPolicySyntaxError:

    def test_token_in_message(self):
        e = PolicySyntaxError("max=0x10", "not decimal")
        assert e.token == "max=0x10"
        assert "max=0x10" in str(e)
        assert e.code == "POLICY_SYNTAX"

    def test_without_token(self):
        e = PolicySyntaxError(reason="no policy items")
        assert e.token == ""
        assert "no policy items" in str(e)


class TestWeakPasswordError:

    def test_reason_and_message(self):
        e = WeakPasswordError(Reason.PERSONAL)
        assert e.reason is Reason.PERSONAL
        assert e.field == "new_password"
        assert str(e) == "based on personal login information"
        assert e.code == "PASSWORD_PERSONAL"


# ── catchable as parent ────────────────────────────────────────────────────────

class TestCatchability:

    def test_syntax_caught_as_validation_error(self):
        with pytest.raises(ValidationError):
            raise PolicySyntaxError("x")

    def test_dictionary_caught_as_service_error(self):
        with pytest.raises(ServiceError):
            raise DictionaryError("lookup failed")

    def test_all_caught_as_root(self):
        with pytest.raises(PasswordCheckError):
            raise ConfigurationError("bad config")
