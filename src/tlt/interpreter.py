"""
Tree-walking evaluator for tlt expressions.

Evaluates an expression tree bottom-up to produce a Value, or None when an
operator meets operand kinds it has no rule for.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Type

from .ast import Add, BinaryOp, Divide, Expression, Literal, Multiply, Subtract
from .config import DEFAULT_CONFIG, EvalConfig
from .errors import TltError, error_unknown_node
from .rules import (
    type_checked_add, type_checked_div, type_checked_mul, type_checked_sub,
    type_checked_var,
)
from .values import Value

logger = logging.getLogger(__name__)

BinaryRule = Callable[[Value, Value, Optional[EvalConfig]], Optional[Value]]

_BINARY_RULES: Dict[Type[BinaryOp], BinaryRule] = {
    Add: type_checked_add,
    Subtract: type_checked_sub,
    Multiply: type_checked_mul,
    Divide: type_checked_div,
}


@dataclass
class EvaluationResult:
    """Result of evaluating an expression."""
    success: bool
    value: Optional[Value] = None
    error: Optional[TltError] = None

    @property
    def data(self):
        """Get the raw payload of the result value."""
        if self.value is not None:
            return self.value.data
        return None

    @property
    def error_message(self) -> Optional[str]:
        if self.error is not None:
            return str(self.error)
        return None


class Interpreter:
    """
    Tree-walking interpreter for tlt expressions.

    Evaluates nodes by dispatching on their class. A failed left operand
    short-circuits: the right operand is then never evaluated.
    """

    def __init__(self, config: Optional[EvalConfig] = None):
        """
        Initialize the interpreter.

        Args:
            config: Integer overflow and zero-division policies
        """
        self.config = config or DEFAULT_CONFIG
        self.nodes_evaluated = 0

    def evaluate(self, expr: Expression) -> Optional[Value]:
        """
        Evaluate an expression tree.

        Args:
            expr: Root of the tree

        Returns:
            The resulting Value, or None on a type mismatch

        Raises:
            DivisionByZeroError, IntegerOverflowError: per the config policies
        """
        self.nodes_evaluated = 0
        result = self._evaluate(expr)
        logger.debug("evaluated %d node(s): %r", self.nodes_evaluated, result)
        return result

    def _evaluate(self, expr: Expression) -> Optional[Value]:
        """Evaluate a single node."""
        self.nodes_evaluated += 1
        if isinstance(expr, Literal):
            return type_checked_var(expr.value)
        elif isinstance(expr, BinaryOp):
            return self._eval_binary_op(expr)
        else:
            raise error_unknown_node(expr)

    def _eval_binary_op(self, op: BinaryOp) -> Optional[Value]:
        """Evaluate a binary operation."""
        rule = _BINARY_RULES.get(type(op))
        if rule is None:
            raise error_unknown_node(op)

        left = self._evaluate(op.left)
        if left is None:
            return None
        right = self._evaluate(op.right)
        if right is None:
            return None
        return rule(left, right, self.config)


def evaluate(expr: Expression, config: Optional[EvalConfig] = None) -> Optional[Value]:
    """
    Convenience function to evaluate an expression.

    Returns the resulting Value, or None on a type mismatch.
    """
    return Interpreter(config).evaluate(expr)


def execute(expr: Expression, config: Optional[EvalConfig] = None) -> EvaluationResult:
    """
    Evaluate an expression, capturing fatal errors in the result.

    Type mismatches give an unsuccessful result with no error attached.
    """
    try:
        value = evaluate(expr, config)
    except TltError as e:
        logger.debug("evaluation failed: %s", e)
        return EvaluationResult(success=False, error=e)
    return EvaluationResult(success=value is not None, value=value)
