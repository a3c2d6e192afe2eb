"""
Expression tree node definitions for the tlt evaluator.

An expression is either a Literal leaf holding a Value, or one of four
binary operator nodes (Add, Subtract, Multiply, Divide) holding two child
expressions. Nodes are frozen, so a tree is finite and acyclic: a node can
only nest subtrees that already exist.

Kinds are not checked at construction time. ``Add(lit(True), lit("x"))`` is
a perfectly good tree; it just fails to evaluate.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from .types import ValueKind
from .values import Value, wrap_value


# =============================================================================
# Base Classes
# =============================================================================

@dataclass(frozen=True)
class Expression:
    """Base class for all expressions."""

    def accept(self, visitor: "ExpressionVisitor") -> Any:
        """Accept a visitor for traversal."""
        method_name = f"visit_{self.__class__.__name__}"
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self)


class ExpressionVisitor:
    """Base class for expression visitors."""

    def generic_visit(self, node: Expression) -> Any:
        """Default visit method."""
        raise NotImplementedError(f"No visitor for {node.__class__.__name__}")


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass(frozen=True)
class Literal(Expression):
    """A literal value leaf."""
    value: Value


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Base class for binary operators (e.g., a + b)."""
    left: Expression
    right: Expression

    symbol: ClassVar[str] = "?"


@dataclass(frozen=True)
class Add(BinaryOp):
    """Addition: left + right."""
    symbol: ClassVar[str] = "+"


@dataclass(frozen=True)
class Subtract(BinaryOp):
    """Subtraction: left - right."""
    symbol: ClassVar[str] = "-"


@dataclass(frozen=True)
class Multiply(BinaryOp):
    """Multiplication: left * right."""
    symbol: ClassVar[str] = "*"


@dataclass(frozen=True)
class Divide(BinaryOp):
    """Division: left / right."""
    symbol: ClassVar[str] = "/"


BINARY_OPS = (Add, Subtract, Multiply, Divide)


def lit(data: Any) -> Literal:
    """Build a Literal from a Value or a raw Python object."""
    return Literal(wrap_value(data))


# =============================================================================
# Visitor Helpers
# =============================================================================

class FormatVisitor(ExpressionVisitor):
    """Renders an expression as fully parenthesised infix text."""

    def visit_Literal(self, node: Literal) -> str:
        value = node.value
        if value.kind == ValueKind.NIL:
            return "nil"
        if value.kind == ValueKind.BOO:
            return "true" if value.data else "false"
        # ints and floats print as Python literals, text gets quoted
        return repr(value.data)

    def generic_visit(self, node: Expression) -> str:
        if isinstance(node, BinaryOp):
            left = node.left.accept(self)
            right = node.right.accept(self)
            return f"({left} {node.symbol} {right})"
        return super().generic_visit(node)


class PrintVisitor(ExpressionVisitor):
    """Debug visitor that prints the tree structure."""

    def __init__(self, indent: int = 0):
        self.indent = indent

    def _print(self, text: str) -> None:
        print("  " * self.indent + text)

    def visit_Literal(self, node: Literal) -> None:
        self._print(f"Literal {node.value!r}")

    def generic_visit(self, node: Expression) -> None:
        if not isinstance(node, BinaryOp):
            return super().generic_visit(node)
        self._print(f"{node.__class__.__name__} ({node.symbol})")
        for child in (node.left, node.right):
            child.accept(PrintVisitor(self.indent + 1))


def format_expression(node: Expression) -> str:
    """Render an expression as infix text, e.g. ``(10 + 20.0)``."""
    return node.accept(FormatVisitor())


def print_ast(node: Expression) -> None:
    """Print an expression tree for debugging."""
    node.accept(PrintVisitor())


def depth(node: Expression) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if isinstance(node, BinaryOp):
        return 1 + max(depth(node.left), depth(node.right))
    return 1


def node_count(node: Expression) -> int:
    """Total number of nodes in the tree."""
    if isinstance(node, BinaryOp):
        return 1 + node_count(node.left) + node_count(node.right)
    return 1
