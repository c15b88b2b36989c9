from .dictionary import Dictionary, WordList
from .policy_evaluator import CheckOutcome, PolicyEvaluator, check
from .policy_parser import format_policy, parse_policy

__all__ = [
    "Dictionary",
    "WordList",
    "CheckOutcome",
    "PolicyEvaluator",
    "check",
    "format_policy",
    "parse_policy",
]
