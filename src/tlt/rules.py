"""
Type-checked operator rules.

Each rule takes two already-evaluated Values and returns a Value on success
or None on a type mismatch. All four arithmetic operators share one
structure and differ only in the arithmetic applied:

    int, int  -> int   (exact, then the overflow policy)
    int, rat  -> rat   (left widened)
    rat, int  -> rat   (right widened)
    rat, rat  -> rat
    otherwise -> None
"""

import logging
import math
import operator
from enum import Enum
from typing import Callable, Dict, Optional

from .config import DEFAULT_CONFIG, EvalConfig, OverflowPolicy, ZeroDivisionPolicy
from .errors import error_division_by_zero, error_overflow
from .types import ValueKind, U64_MIN, U64_MAX, U64_MODULUS
from .values import Value, int_val, rat_val, widen

logger = logging.getLogger(__name__)


class Operator(Enum):
    """Binary arithmetic operators."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value


def _rat_div(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is nan."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_INT_ARITHMETIC: Dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    # floor division equals truncation for unsigned operands
    Operator.DIV: operator.floordiv,
}

_RAT_ARITHMETIC: Dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: _rat_div,
}


def apply_overflow_policy(op: Operator, left: int, right: int, result: int,
                          policy: OverflowPolicy) -> int:
    """Bring an integer result back into the u64 range per the policy."""
    if U64_MIN <= result <= U64_MAX:
        return result
    if policy == OverflowPolicy.WRAP:
        wrapped = result % U64_MODULUS
        logger.debug("wrapped %d %s %d = %d to %d", left, op.symbol, right, result, wrapped)
        return wrapped
    if policy == OverflowPolicy.SATURATE:
        clamped = U64_MIN if result < U64_MIN else U64_MAX
        logger.debug("saturated %d %s %d = %d to %d", left, op.symbol, right, result, clamped)
        return clamped
    raise error_overflow(op.symbol, left, right, result)


def _combine_ints(op: Operator, left: int, right: int,
                  config: EvalConfig) -> Optional[Value]:
    if op == Operator.DIV and right == 0:
        if config.zero_division == ZeroDivisionPolicy.FAILURE:
            logger.debug("integer division by zero (%d / 0) treated as failure", left)
            return None
        raise error_division_by_zero(left)
    result = _INT_ARITHMETIC[op](left, right)
    return int_val(apply_overflow_policy(op, left, right, result, config.overflow))


def combine(op: Operator, left: Value, right: Value,
            config: Optional[EvalConfig] = None) -> Optional[Value]:
    """
    Apply an arithmetic operator to two values.

    Args:
        op: The operator to apply
        left: Left operand
        right: Right operand
        config: Integer overflow and zero-division policies

    Returns:
        The combined Value, or None if the operand kinds have no rule
    """
    if config is None:
        config = DEFAULT_CONFIG

    kinds = (left.kind, right.kind)
    if kinds == (ValueKind.INT, ValueKind.INT):
        return _combine_ints(op, left.data, right.data, config)
    if kinds in ((ValueKind.INT, ValueKind.RAT),
                 (ValueKind.RAT, ValueKind.INT),
                 (ValueKind.RAT, ValueKind.RAT)):
        return rat_val(_RAT_ARITHMETIC[op](widen(left), widen(right)))

    logger.debug("type mismatch: %s %s %s", left.kind, op.symbol, right.kind)
    return None


# Type-checked and error-handled expression rules

def type_checked_var(value: Value) -> Optional[Value]:
    """Literal rule: always succeeds with the value unchanged."""
    return value


def type_checked_add(left: Value, right: Value,
                     config: Optional[EvalConfig] = None) -> Optional[Value]:
    """Add rule."""
    return combine(Operator.ADD, left, right, config)


def type_checked_sub(left: Value, right: Value,
                     config: Optional[EvalConfig] = None) -> Optional[Value]:
    """Subtract rule."""
    return combine(Operator.SUB, left, right, config)


def type_checked_mul(left: Value, right: Value,
                     config: Optional[EvalConfig] = None) -> Optional[Value]:
    """Multiply rule."""
    return combine(Operator.MUL, left, right, config)


def type_checked_div(left: Value, right: Value,
                     config: Optional[EvalConfig] = None) -> Optional[Value]:
    """Divide rule. Integer division truncates; rational division is IEEE-754."""
    return combine(Operator.DIV, left, right, config)
