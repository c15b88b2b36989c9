# core/__init__.py
"""
passwordcheck Core Module
=========================

Policy model, rejection reasons and the ambient configuration / logging
layer shared by the services.

Public API:
    - Policy: Policy, DEFAULT_POLICY, DISABLED
    - Reasons: Reason, reason_message
    - Configuration: Config, get_config, load_policy
    - Logging: LoggingConfig
"""

# Policy model
from .policy import DEFAULT_POLICY, DISABLED, Policy

# Reasons
from .reasons import Reason, reason_message

# Configuration
from .config import Config, get_config, load_policy

# Utilities
from .singleton import SingletonMeta

# Logging
from .logging_config import LoggingConfig

__all__ = [
    # Policy
    "Policy",
    "DEFAULT_POLICY",
    "DISABLED",

    # Reasons
    "Reason",
    "reason_message",

    # Configuration
    "Config",
    "get_config",
    "load_policy",

    # Utilities
    "SingletonMeta",
    "LoggingConfig",
]
