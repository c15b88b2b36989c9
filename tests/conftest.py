"""
tests/conftest.py
=================
Shared pytest fixtures — in-memory word lists, isolated configuration.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from constants import ConfigKeys
from core.config import Config
from core.policy import DEFAULT_POLICY
from services.dictionary import WordList
from services.policy_evaluator import PolicyEvaluator


COMMON_WORDS = [
    "password", "dragon", "monkey", "sunshine", "letmein",
    "secret", "welcome", "football", "princess", "shadow",
]


# ─── Dictionary / evaluator ──────────────────────────────────────────────────

@pytest.fixture
def word_list():
    return WordList(COMMON_WORDS)


@pytest.fixture
def evaluator(word_list):
    """Evaluator backed by the small common-word list."""
    return PolicyEvaluator(word_list)


@pytest.fixture
def bare_evaluator():
    """Evaluator with an empty dictionary."""
    return PolicyEvaluator()


# ─── Policy factory ──────────────────────────────────────────────────────────

@pytest.fixture
def make_policy():
    def _f(**changes):
        return DEFAULT_POLICY.replace(**changes)
    return _f


# ─── Isolated configuration ──────────────────────────────────────────────────

@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """
    Fresh Config singleton rooted in tmp_path: no .env, no settings file,
    and none of the library's keys inherited from the real environment.
    """
    for key in (ConfigKeys.PASSWORD_POLICY, ConfigKeys.CONFIG_FILE,
                ConfigKeys.LOG_LEVEL, ConfigKeys.LOG_DIR):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    Config.clear_instance()
    yield tmp_path
    Config.clear_instance()
