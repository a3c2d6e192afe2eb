"""
Evaluator configuration.

Two behaviors of unsigned integer arithmetic are policy choices rather than
type rules: what happens when a result leaves the u64 range, and what
happens on integer division by zero. Both default to fatal.

Environment variables:
    TLT_OVERFLOW        checked | wrap | saturate
    TLT_ZERO_DIVISION   fatal | failure
"""

import logging
import os
from dataclasses import dataclass, replace as _replace
from enum import Enum
from typing import Mapping, Optional

from .errors import error_invalid_policy

logger = logging.getLogger(__name__)

OVERFLOW_ENV = "TLT_OVERFLOW"
ZERO_DIVISION_ENV = "TLT_ZERO_DIVISION"


class OverflowPolicy(Enum):
    """How integer results outside [0, 2**64 - 1] are handled."""
    CHECKED = "checked"    # raise IntegerOverflowError
    WRAP = "wrap"          # reduce modulo 2**64
    SATURATE = "saturate"  # clamp to 0 or 2**64 - 1


class ZeroDivisionPolicy(Enum):
    """How integer division by zero is handled."""
    FATAL = "fatal"        # raise DivisionByZeroError
    FAILURE = "failure"    # evaluate to no result


def _parse_policy(enum_cls, setting: str, name: str):
    try:
        return enum_cls(name.strip().lower())
    except ValueError:
        raise error_invalid_policy(setting, name, [p.value for p in enum_cls]) from None


@dataclass(frozen=True)
class EvalConfig:
    """Evaluation policies for integer arithmetic."""
    overflow: OverflowPolicy = OverflowPolicy.CHECKED
    zero_division: ZeroDivisionPolicy = ZeroDivisionPolicy.FATAL

    def replace(self, **changes) -> "EvalConfig":
        """Return a copy with the given fields changed."""
        return _replace(self, **changes)

    @classmethod
    def from_names(cls, overflow: Optional[str] = None,
                   zero_division: Optional[str] = None) -> "EvalConfig":
        """Build a config from policy names, keeping defaults for None."""
        config = cls()
        if overflow is not None:
            config = config.replace(
                overflow=_parse_policy(OverflowPolicy, "overflow", overflow))
        if zero_division is not None:
            config = config.replace(
                zero_division=_parse_policy(ZeroDivisionPolicy, "zero-division", zero_division))
        return config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EvalConfig":
        """Build a config from TLT_* environment variables."""
        if environ is None:
            environ = os.environ
        config = cls.from_names(
            overflow=environ.get(OVERFLOW_ENV) or None,
            zero_division=environ.get(ZERO_DIVISION_ENV) or None,
        )
        logger.debug("loaded config from environment: %s", config)
        return config


DEFAULT_CONFIG = EvalConfig()
