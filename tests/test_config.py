"""
Tests for evaluator configuration.
"""

import pytest

from tlt import (
    EvalConfig, OverflowPolicy, ZeroDivisionPolicy, DEFAULT_CONFIG,
    ConfigError,
)


class TestEvalConfig:
    """Test config construction and defaults."""

    def test_defaults_are_fatal(self):
        """Test that both policies default to raising."""
        assert DEFAULT_CONFIG.overflow == OverflowPolicy.CHECKED
        assert DEFAULT_CONFIG.zero_division == ZeroDivisionPolicy.FATAL
        assert EvalConfig() == DEFAULT_CONFIG

    def test_replace(self):
        """Test copying with changes."""
        config = DEFAULT_CONFIG.replace(overflow=OverflowPolicy.WRAP)
        assert config.overflow == OverflowPolicy.WRAP
        assert config.zero_division == ZeroDivisionPolicy.FATAL
        # original untouched
        assert DEFAULT_CONFIG.overflow == OverflowPolicy.CHECKED

    def test_from_names(self):
        """Test building from policy names."""
        config = EvalConfig.from_names("Saturate", "failure")
        assert config.overflow == OverflowPolicy.SATURATE
        assert config.zero_division == ZeroDivisionPolicy.FAILURE
        assert EvalConfig.from_names() == DEFAULT_CONFIG

    def test_invalid_name(self):
        """Test that unknown policy names are rejected."""
        with pytest.raises(ConfigError, match="invalid overflow policy 'clamp'") as exc_info:
            EvalConfig.from_names(overflow="clamp")
        assert exc_info.value.code == "E405"
        with pytest.raises(ConfigError, match="zero-division"):
            EvalConfig.from_names(zero_division="ignore")


class TestEnvironment:
    """Test loading from TLT_* variables."""

    def test_empty_environment(self):
        assert EvalConfig.from_env({}) == DEFAULT_CONFIG

    def test_both_variables(self):
        config = EvalConfig.from_env({
            "TLT_OVERFLOW": "wrap",
            "TLT_ZERO_DIVISION": "FAILURE",
        })
        assert config.overflow == OverflowPolicy.WRAP
        assert config.zero_division == ZeroDivisionPolicy.FAILURE

    def test_blank_variable_ignored(self):
        assert EvalConfig.from_env({"TLT_OVERFLOW": ""}) == DEFAULT_CONFIG

    def test_invalid_variable(self):
        with pytest.raises(ConfigError):
            EvalConfig.from_env({"TLT_ZERO_DIVISION": "maybe"})

    def test_reads_os_environ(self, clean_env):
        clean_env.setenv("TLT_OVERFLOW", "saturate")
        assert EvalConfig.from_env().overflow == OverflowPolicy.SATURATE
