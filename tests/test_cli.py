"""
Tests for the tlt command-line entry point.
"""

import logging
import pytest

from tlt.__main__ import main, demo_expressions, GREETING


class TestCli:
    """Test python -m tlt."""

    def test_greeting(self, capsys, clean_env):
        """Test that no action prints the greeting."""
        assert main([]) == 0
        assert capsys.readouterr().out == "Hello, world!\n"

    def test_demo(self, capsys, clean_env):
        """Test the demonstration output."""
        assert main(["demo"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            GREETING,
            "(10 + 20.0) => Rat(30.0)",
            "(10 - 20.0) => Rat(-10.0)",
            "(10 * 20.0) => Rat(200.0)",
            "(10 / 20.0) => Rat(0.5)",
            "(true + 1) => <no result>",
        ]

    def test_demo_with_policies(self, capsys, clean_env):
        """Test that policy flags are accepted."""
        assert main(["demo", "--overflow", "wrap", "--zero-division", "failure"]) == 0
        assert "Rat(0.5)" in capsys.readouterr().out

    def test_invalid_policy_flag(self, clean_env):
        """Test that argparse rejects unknown policy names."""
        with pytest.raises(SystemExit):
            main(["demo", "--overflow", "clamp"])

    def test_invalid_policy_env(self, capsys, clean_env):
        """Test that a bad environment variable is reported."""
        clean_env.setenv("TLT_OVERFLOW", "clamp")
        assert main(["demo"]) == 1
        assert "error[E405]" in capsys.readouterr().err

    def test_demo_expressions(self):
        """Test that the demo covers the five reference scenarios."""
        assert len(demo_expressions()) == 5

    def test_verbose_enables_debug(self, caplog, clean_env):
        """Test that -v turns on debug records from the evaluator."""
        assert main(["-v", "demo"]) == 0
        debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("type mismatch: boo + int" in r.getMessage() for r in debug)
        assert any(r.getMessage().startswith("evaluated 3 node(s)") for r in debug)

    def test_quiet_by_default(self, caplog, clean_env):
        """Test that debug records are suppressed without -v."""
        assert main(["demo"]) == 0
        assert not [r for r in caplog.records if r.levelno == logging.DEBUG]

    def test_verbose_after_action_rejected(self, clean_env):
        """Test that -v is a top-level flag, placed before the action."""
        with pytest.raises(SystemExit):
            main(["demo", "-v"])
