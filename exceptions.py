"""
exceptions.py
=============
passwordcheck — Hierarchical Exception System

All library exceptions inherit from PasswordCheckError so callers
can catch the full hierarchy with a single except clause when needed.

Rejected passwords are NOT exceptions: the evaluator returns a
CheckOutcome carrying a Reason. WeakPasswordError exists only for
callers that explicitly ask for the raising variant (enforce()).

Structure
---------
PasswordCheckError
├── ValidationError
│   ├── InvalidPolicyError
│   ├── PolicySyntaxError
│   └── WeakPasswordError
├── ServiceError
│   └── DictionaryError
└── ConfigurationError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class PasswordCheckError(Exception):
    """Base exception for all passwordcheck errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "POLICY_SYNTAX"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(PasswordCheckError):
    """Raised when caller-provided data fails validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidPolicyError(ValidationError):
    """Raised when a Policy field is out of range or breaks a tier invariant."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid policy value for '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        kwargs.setdefault("code", "POLICY_INVALID")
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.reason = reason


class PolicySyntaxError(ValidationError):
    """Raised when policy text cannot be parsed; carries the offending token."""

    def __init__(self, token: str = "", reason: str = "", **kwargs):
        if token:
            msg = f"Invalid policy item {token!r}"
        else:
            msg = "Invalid policy text"
        if reason:
            msg += f": {reason}"
        kwargs.setdefault("code", "POLICY_SYNTAX")
        super().__init__(msg, **kwargs)
        self.token = token
        self.reason = reason


class WeakPasswordError(ValidationError):
    """Raised by enforce() when a password is rejected by the policy."""

    def __init__(self, reason, **kwargs):
        # reason is a core.reasons.Reason; imported lazily to keep this module leaf-level
        from core.reasons import reason_message
        kwargs.setdefault("code", f"PASSWORD_{reason.name}")
        super().__init__(reason_message(reason), field="new_password", **kwargs)
        self.reason = reason


# ─── Service ─────────────────────────────────────────────────────────────────

class ServiceError(PasswordCheckError):
    """Base for errors raised by the service layer."""


class DictionaryError(ServiceError):
    """Raised when the injected dictionary lookup fails."""


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(PasswordCheckError):
    """Raised when the application configuration is invalid or incomplete."""
