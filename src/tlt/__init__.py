"""
tlt: a type-checked arithmetic expression evaluator.

This package provides:
- Values: boo, int (u64), nil, rat (f64) and txt runtime values
- Expressions: Literal leaves and Add/Subtract/Multiply/Divide nodes
- Rules: per-operator type-checked combination of two values
- Interpreter: recursive evaluator with short-circuit failure propagation

Usage:
    from tlt import Add, lit, evaluate

    result = evaluate(Add(lit(10), lit(20.0)))
    if result is None:
        print("type mismatch")
    else:
        print(result)   # Rat(30.0)
"""

from importlib.metadata import PackageNotFoundError, version

from .types import (
    ValueKind,
    NUMERIC_KINDS,
    U64_MAX,
    resolve_kind_name,
)

from .values import (
    Value,
    NIL,
    boo_val,
    int_val,
    nil_val,
    rat_val,
    txt_val,
    wrap_value,
    unwrap_value,
)

from .ast import (
    Expression,
    ExpressionVisitor,
    Literal,
    BinaryOp,
    Add,
    Subtract,
    Multiply,
    Divide,
    lit,
    format_expression,
    print_ast,
    depth,
    node_count,
)

from .errors import (
    TltError,
    InvalidValueError,
    DivisionByZeroError,
    IntegerOverflowError,
    UnknownNodeError,
    ConfigError,
)

from .config import (
    EvalConfig,
    OverflowPolicy,
    ZeroDivisionPolicy,
    DEFAULT_CONFIG,
)

from .rules import (
    Operator,
    combine,
    type_checked_var,
    type_checked_add,
    type_checked_sub,
    type_checked_mul,
    type_checked_div,
)

from .interpreter import (
    Interpreter,
    EvaluationResult,
    evaluate,
    execute,
)

try:
    __version__ = version("tlt")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    # Kinds
    'ValueKind',
    'NUMERIC_KINDS',
    'U64_MAX',
    'resolve_kind_name',

    # Values
    'Value',
    'NIL',
    'boo_val',
    'int_val',
    'nil_val',
    'rat_val',
    'txt_val',
    'wrap_value',
    'unwrap_value',

    # Expressions
    'Expression',
    'ExpressionVisitor',
    'Literal',
    'BinaryOp',
    'Add',
    'Subtract',
    'Multiply',
    'Divide',
    'lit',
    'format_expression',
    'print_ast',
    'depth',
    'node_count',

    # Errors
    'TltError',
    'InvalidValueError',
    'DivisionByZeroError',
    'IntegerOverflowError',
    'UnknownNodeError',
    'ConfigError',

    # Config
    'EvalConfig',
    'OverflowPolicy',
    'ZeroDivisionPolicy',
    'DEFAULT_CONFIG',

    # Rules
    'Operator',
    'combine',
    'type_checked_var',
    'type_checked_add',
    'type_checked_sub',
    'type_checked_mul',
    'type_checked_div',

    # Interpreter
    'Interpreter',
    'EvaluationResult',
    'evaluate',
    'execute',
]
