"""
services/policy_parser.py
==========================
Policy text format:

    min=N0,N1,N2,N3,N4 max=N passphrase=N match=N similar=permit|deny

Items are separated by spaces or newlines and may come in any order;
items that are left out keep the value of the base policy (DEFAULT_POLICY
unless another one is given). Every Ni is "disabled" or a base-10
non-negative integer; no signs, no 0x / 0o prefixes.

The first bad token aborts parsing. Text without any item is an error,
not "all defaults".
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Tuple

from constants import MIN_TIERS, PolicyKeys as PK
from core.policy import DEFAULT_POLICY, DISABLED, MinLength, Policy
from exceptions import PolicySyntaxError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[ \n]+")
_DECIMAL = re.compile(r"[0-9]+", re.ASCII)

# text item name → Policy field
_FIELDS = {
    PK.MIN: "min",
    PK.MAX: "max",
    PK.PASSPHRASE: "passphrase_words",
    PK.MATCH: "match_length",
    PK.SIMILAR: "deny_similar",
}


def _parse_int(value: str, token: str) -> int:
    if not _DECIMAL.fullmatch(value):
        raise PolicySyntaxError(token, f"{value!r} is not a non-negative decimal integer")
    return int(value, 10)


def _parse_min(value: str, token: str) -> Tuple[MinLength, ...]:
    parts = value.split(PK.LIST_SEPARATOR)
    if len(parts) != MIN_TIERS:
        raise PolicySyntaxError(token, f"expected {MIN_TIERS} values, got {len(parts)}")
    return tuple(
        DISABLED if part == PK.DISABLED else _parse_int(part, token)
        for part in parts
    )


def _parse_similar(value: str, token: str) -> bool:
    if value == PK.DENY:
        return True
    if value == PK.PERMIT:
        return False
    raise PolicySyntaxError(token, f"expected {PK.PERMIT!r} or {PK.DENY!r}")


def parse_policy(text: str, base: Policy = DEFAULT_POLICY) -> Policy:
    """
    Parse policy text into a Policy.

    Raises:
        PolicySyntaxError: malformed token, unknown item, bad value or no items
        InvalidPolicyError: well-formed values that break a Policy invariant
    """
    tokens = [t for t in _SEPARATORS.split(text or "") if t]
    if not tokens:
        raise PolicySyntaxError(reason="no policy items")

    changes: Dict[str, object] = {}
    for token in tokens:
        name, sep, value = token.partition(PK.ASSIGN)
        if not sep:
            raise PolicySyntaxError(token, "expected name=value")
        if name not in _FIELDS:
            raise PolicySyntaxError(token, f"unknown item {name!r}")

        if name == PK.MIN:
            parsed = _parse_min(value, token)
        elif name == PK.SIMILAR:
            parsed = _parse_similar(value, token)
        else:
            parsed = _parse_int(value, token)
        changes[_FIELDS[name]] = parsed

    policy = base.replace(**changes)
    logger.debug(f"Parsed policy: {format_policy(policy)}")
    return policy


def _format_min(value: MinLength) -> str:
    return PK.DISABLED if value is DISABLED else str(value)


def format_policy(policy: Policy, separator: str = " ") -> str:
    """Canonical text form; parse_policy(format_policy(p)) == p."""
    items = [
        f"{PK.MIN}={PK.LIST_SEPARATOR.join(_format_min(v) for v in policy.min)}",
        f"{PK.MAX}={policy.max}",
        f"{PK.PASSPHRASE}={policy.passphrase_words}",
        f"{PK.MATCH}={policy.match_length}",
        f"{PK.SIMILAR}={PK.DENY if policy.deny_similar else PK.PERMIT}",
    ]
    return separator.join(items)
