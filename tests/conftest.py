"""
Pytest configuration for tlt tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE=ci)
- Shared fixtures for building expressions
"""

import os
import pytest

from tlt import EvalConfig, OverflowPolicy, ZeroDivisionPolicy

try:
    from hypothesis import settings

    settings.register_profile("default", print_blob=True)
    settings.register_profile("ci", print_blob=True, max_examples=500, deadline=None)
    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
except ImportError:
    pass


@pytest.fixture
def wrap_config():
    """Config with wrapping integer arithmetic."""
    return EvalConfig(overflow=OverflowPolicy.WRAP)


@pytest.fixture
def saturate_config():
    """Config with saturating integer arithmetic."""
    return EvalConfig(overflow=OverflowPolicy.SATURATE)


@pytest.fixture
def lenient_division_config():
    """Config where integer division by zero yields no result."""
    return EvalConfig(zero_division=ZeroDivisionPolicy.FAILURE)


@pytest.fixture
def clean_env(monkeypatch):
    """Keep TLT_* variables from the outer environment out of a test."""
    monkeypatch.delenv("TLT_OVERFLOW", raising=False)
    monkeypatch.delenv("TLT_ZERO_DIVISION", raising=False)
    return monkeypatch
