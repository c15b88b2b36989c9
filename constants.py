"""
passwordcheck Constants - Single Source of Truth
================================================

This file contains the fixed tables used across the library.
Using constants instead of magic strings prevents typos and makes refactoring easier.
"""


class PolicyKeys:
    """
    Item names of the policy text format - SINGLE SOURCE OF TRUTH

    Usage:
        from constants import PolicyKeys as PK
        text = f"{PK.MAX}={policy.max}"
    """

    MIN = "min"
    MAX = "max"
    PASSPHRASE = "passphrase"
    MATCH = "match"
    SIMILAR = "similar"

    ALL = (MIN, MAX, PASSPHRASE, MATCH, SIMILAR)

    # ==================== Literal values ====================
    DISABLED = "disabled"
    PERMIT = "permit"
    DENY = "deny"

    # ==================== Separators ====================
    ASSIGN = "="
    LIST_SEPARATOR = ","


class ConfigKeys:
    """Configuration keys read by core.config."""

    PASSWORD_POLICY = "PASSWORD_POLICY"
    CONFIG_FILE = "PASSWORDCHECK_CONFIG"
    LOG_LEVEL = "LOG_LEVEL"
    LOG_DIR = "LOG_DIR"


# Number of entries in Policy.min
MIN_TIERS = 5

# Policy.min indexes
TIER_ONE_CLASS = 0
TIER_TWO_CLASSES = 1
TIER_PASSPHRASE = 2
TIER_THREE_CLASSES = 3
TIER_FOUR_CLASSES = 4

# Shortest run considered a sequence
MIN_SEQUENCE_LENGTH = 3

# Common keyboard walks; matched case-insensitively, forwards and backwards
KEYBOARD_ROWS = (
    "`1234567890-=",
    "~!@#$%^&*()_+",
    "qwertyuiop[]\\",
    "asdfghjkl;'",
    "zxcvbnm,./",
    "qazwsxedcrfvtgbyhnujmikolp",
    "1qaz2wsx3edc4rfv5tgb6yhn7ujm8ik9ol0p",
    "qwertzuiop",
    "yxcvbnm",
    "azertyuiop",
    "qsdfghjklm",
    "wxcvbn",
)

# Leet-speak substitutions applied before dictionary lookups
LEET_SUBSTITUTIONS = {
    "0": "o",
    "1": "l",
    "3": "e",
    "4": "a",
    "5": "s",
    "7": "t",
    "8": "b",
    "$": "s",
    "@": "a",
    "+": "t",
}
